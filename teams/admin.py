from django.contrib import admin
from .models import Team, TeamMember, TeamApplication, TeamInvitation


class TeamMemberInline(admin.TabularInline):
    model = TeamMember
    extra = 0


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ('name', 'event', 'leader', 'status', 'max_size', 'join_code', 'created_at')
    list_filter = ('status', 'event')
    search_fields = ('name', 'join_code', 'leader__username')
    inlines = [TeamMemberInline]


@admin.register(TeamApplication)
class TeamApplicationAdmin(admin.ModelAdmin):
    list_display = ('applicant', 'team', 'status', 'applied_at', 'reviewed_at')
    list_filter = ('status',)


@admin.register(TeamInvitation)
class TeamInvitationAdmin(admin.ModelAdmin):
    list_display = ('inviter', 'invitee', 'team', 'status', 'sent_at')
    list_filter = ('status',)
