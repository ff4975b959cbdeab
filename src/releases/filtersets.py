from django_filters import rest_framework as filters

from releases.models import Release


class ReleaseFilterSet(filters.FilterSet):
    status = filters.MultipleChoiceFilter(choices=Release.STATUS_CHOICES)
    user_id = filters.NumberFilter(field_name='user_id')
    created_after = filters.DateTimeFilter(field_name='created', lookup_expr='gte')

    class Meta:
        model = Release
        fields = [
            'status',
            'payment_status',
            'takedown_requested',
            'archived',
            'user_id',
        ]
