#!/usr/bin/env python
"""
Command-line entry point of the hospital administration backend.

Typical use::

    python manage.py migrate --run-syncdb   # create the tables from the models
    python manage.py populate_data          # load the demo dataset
    python manage.py runserver
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Django project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hopital.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()