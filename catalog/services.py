"""Catalogue write operations that span more than one row or a file.

Views validate input first; these helpers only perform the writes, so a
rejected request never reaches them and nothing is partially applied.
"""
from __future__ import annotations

import logging
from typing import Iterable

from django.db import transaction
from django.db.models import Model

from .models import Lecturer, LearningModule, LecturerLearningModule

logger = logging.getLogger(__name__)


def attach_learning_modules(lecturer: Lecturer, modules: Iterable[LearningModule]) -> None:
    """Link `modules` to `lecturer`; already-linked modules are skipped.

    Existing pairs, including ones inserted by a concurrent request, are
    left to the unique constraint and ignored.
    """
    modules = list(modules)
    links = [LecturerLearningModule(lecturer=lecturer, learning_module=m) for m in modules]
    with transaction.atomic():
        LecturerLearningModule.objects.bulk_create(links, ignore_conflicts=True)
    logger.info("Attached modules %s to lecturer %s", [m.pk for m in modules], lecturer.pk)


def detach_learning_modules(lecturer: Lecturer, modules: Iterable[LearningModule]) -> None:
    """Unlink `modules` from `lecturer`; pairs that were never linked are ignored."""
    modules = list(modules)
    with transaction.atomic():
        lecturer.learning_modules.remove(*modules)
    logger.info("Detached modules %s from lecturer %s", [m.pk for m in modules], lecturer.pk)


def replace_photo(instance: Model, upload) -> None:
    """Swap the stored photo on `instance` for `upload`.

    The old file is deleted before the new one is assigned. The new file
    is written to storage when the instance is next saved. The file store
    is not transactional with the row; a failure between the two steps
    can leave a stale photo path or an orphaned file behind.
    """
    old = instance.photo
    if old:
        name = old.name
        old.delete(save=False)
        logger.info("Deleted previous photo %s for %s %s", name, type(instance).__name__, instance.pk)
    instance.photo = upload
