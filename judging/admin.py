from django.contrib import admin
from .models import Judge, EventJudge, Scorecard


@admin.register(Judge)
class JudgeAdmin(admin.ModelAdmin):
    list_display = ('profile', 'title', 'company', 'events_judged', 'rating', 'availability')
    list_filter = ('availability',)
    search_fields = ('profile__username', 'profile__full_name', 'company')


@admin.register(EventJudge)
class EventJudgeAdmin(admin.ModelAdmin):
    list_display = ('judge', 'event', 'assigned_at')


@admin.register(Scorecard)
class ScorecardAdmin(admin.ModelAdmin):
    list_display = ('submission', 'judge', 'status', 'total_score', 'submitted_at')
    list_filter = ('status',)
