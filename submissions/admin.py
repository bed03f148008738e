from django.contrib import admin
from .models import Submission


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ('title', 'event', 'team', 'submitted_by', 'status', 'average_score', 'submitted_at')
    list_filter = ('status', 'event')
    search_fields = ('title', 'tagline', 'submitted_by__username')
    readonly_fields = ('average_score',)
