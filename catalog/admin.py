from django.contrib import admin

from .models import Lecturer, LearningModule, LecturerLearningModule


class LecturerLearningModuleInline(admin.TabularInline):
    model = LecturerLearningModule
    extra = 0
    autocomplete_fields = ("learning_module",)


@admin.register(Lecturer)
class LecturerAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "created_at")
    search_fields = ("name", "code")
    inlines = [LecturerLearningModuleInline]


@admin.register(LearningModule)
class LearningModuleAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "created_at")
    search_fields = ("name", "code", "description")
