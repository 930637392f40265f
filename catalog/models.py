"""Catalogue models: lecturers, learning modules, and who teaches what.

`Lecturer` and `LearningModule` are linked many-to-many through
`LecturerLearningModule`. Deleting either side cascades its link rows
only; the other side is untouched.
"""
from __future__ import annotations

import os
import uuid

from django.db import models

from .validators import validate_photo


def _unique_photo_path(folder: str, filename: str) -> str:
    # A fresh name per upload, so a replaced photo never reuses the old URL.
    ext = os.path.splitext(filename)[1].lower()
    return f"{folder}/{uuid.uuid4().hex}{ext}"


def lecturer_photo_path(instance, filename: str) -> str:
    return _unique_photo_path("lecturers", filename)


def learning_module_photo_path(instance, filename: str) -> str:
    return _unique_photo_path("learning_modules", filename)


class Lecturer(models.Model):
    name = models.CharField(max_length=255)
    code = models.CharField(
        max_length=255,
        unique=True,
        error_messages={"unique": "The code has already been taken."},
    )
    photo = models.ImageField(upload_to=lecturer_photo_path, max_length=255, null=True, blank=True, validators=[validate_photo])
    learning_modules = models.ManyToManyField(
        "LearningModule",
        through="LecturerLearningModule",
        related_name="lecturers",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "lecturers"
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name} ({self.code})"


class LearningModule(models.Model):
    name = models.CharField(max_length=255)
    code = models.CharField(
        max_length=255,
        unique=True,
        error_messages={"unique": "The code has already been taken."},
    )
    description = models.TextField(null=True, blank=True)
    photo = models.ImageField(upload_to=learning_module_photo_path, max_length=255, null=True, blank=True, validators=[validate_photo])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "learning_modules"
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name} ({self.code})"


class LecturerLearningModule(models.Model):
    """One lecturer-to-module link.

    A pair may appear only once. Attaching skips pairs the constraint
    already holds.
    """

    lecturer = models.ForeignKey(Lecturer, on_delete=models.CASCADE)
    learning_module = models.ForeignKey(LearningModule, on_delete=models.CASCADE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "lecturer_learning_module"
        constraints = [
            models.UniqueConstraint(fields=["lecturer", "learning_module"], name="uniq_lecturer_learning_module"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.lecturer_id}->{self.learning_module_id}"
