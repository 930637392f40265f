from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "email_verified_at", "is_staff", "created_at")
    list_filter = ("is_staff", "is_active")
    search_fields = ("name", "email")
    exclude = ("password", "groups", "user_permissions")
    readonly_fields = ("api_token", "last_login", "created_at", "updated_at")
