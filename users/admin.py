from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ('username', 'email', 'full_name', 'role', 'wins', 'hackathons_participated', 'is_staff')
    list_filter = ('role', 'is_staff', 'is_superuser', 'is_active')
    search_fields = ('username', 'email', 'full_name')
    fieldsets = UserAdmin.fieldsets + (
        ('Profile', {'fields': ('role', 'full_name', 'avatar_url', 'headline', 'bio', 'location', 'skills', 'preferred_roles', 'expertise', 'badges')}),
        ('Links', {'fields': ('github', 'linkedin', 'twitter', 'website')}),
        ('Stats', {'fields': ('hackathons_participated', 'wins', 'finals', 'organized', 'judged')}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ('Profile', {'fields': ('role', 'full_name')}),
    )
