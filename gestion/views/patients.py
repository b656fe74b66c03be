"""
Patient lookup views.

CRUD on patients is served by the generic collection views; this module
adds the name search used by the admission and transfer forms.
"""
from __future__ import annotations

from django.db.models import Q
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..models import Patient
from ..serializers.patient import PatientSearchQuerySerializer, PatientSerializer


@api_view(['GET'])
def search_patients(request):
    q = PatientSearchQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    term = q.validated_data['query']
    qs = Patient.objects.filter(
        Q(last_name__icontains=term) | Q(first_name__icontains=term)
    ).order_by('last_name', 'first_name')
    return Response(PatientSerializer(qs, many=True).data)
