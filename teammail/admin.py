from django.contrib import admin
from .models import TeamMail, TeamMailRecipient, TeamMailDraft


@admin.register(TeamMail)
class TeamMailAdmin(admin.ModelAdmin):
    list_display = ('subject', 'team', 'sender', 'mail_type', 'priority', 'sent_at')
    list_filter = ('mail_type', 'priority')
    search_fields = ('subject', 'body', 'sender__username')


@admin.register(TeamMailRecipient)
class TeamMailRecipientAdmin(admin.ModelAdmin):
    list_display = ('mail', 'recipient', 'is_read', 'is_starred', 'is_archived', 'is_deleted')


@admin.register(TeamMailDraft)
class TeamMailDraftAdmin(admin.ModelAdmin):
    list_display = ('subject', 'team', 'author', 'updated_at')
