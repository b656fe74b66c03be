"""Administrative application of the hospital backend.

Establishments, services, staff, patients, beds and bed reservations,
with the availability checks and delete guards that keep them
consistent.
"""
