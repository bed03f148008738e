from django.contrib import admin
from .models import Event, EventRegistration


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'status', 'format', 'organizer', 'start_date', 'participant_count')
    list_filter = ('status', 'format', 'start_date')
    search_fields = ('title', 'description', 'organizer__username')
    prepopulated_fields = {'slug': ('title',)}
    readonly_fields = ('participant_count',)
    date_hierarchy = 'start_date'


@admin.register(EventRegistration)
class EventRegistrationAdmin(admin.ModelAdmin):
    list_display = ('user', 'event', 'registered_at')
    search_fields = ('user__username', 'event__title')
