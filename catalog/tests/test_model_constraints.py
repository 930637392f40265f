from __future__ import annotations

import pytest
from django.db import IntegrityError

from catalog.models import Lecturer, LearningModule, LecturerLearningModule


@pytest.mark.django_db
def test_lecturer_code_unique_constraint_raises_integrity_error():
    Lecturer.objects.create(name="A", code="L-1")
    with pytest.raises(IntegrityError):
        Lecturer.objects.create(name="B", code="L-1")


@pytest.mark.django_db
def test_learning_module_code_unique_constraint_raises_integrity_error():
    LearningModule.objects.create(name="A", code="M-1")
    with pytest.raises(IntegrityError):
        LearningModule.objects.create(name="B", code="M-1")


@pytest.mark.django_db
def test_association_pair_is_unique():
    lec = Lecturer.objects.create(name="A", code="L-1")
    mod = LearningModule.objects.create(name="M", code="M-1")
    LecturerLearningModule.objects.create(lecturer=lec, learning_module=mod)
    with pytest.raises(IntegrityError):
        LecturerLearningModule.objects.create(lecturer=lec, learning_module=mod)


@pytest.mark.django_db
def test_deleting_either_side_cascades_links_only():
    lec = Lecturer.objects.create(name="A", code="L-1")
    other = Lecturer.objects.create(name="B", code="L-2")
    mod = LearningModule.objects.create(name="M", code="M-1")
    lec.learning_modules.add(mod)
    other.learning_modules.add(mod)

    lec.delete()
    assert LearningModule.objects.filter(pk=mod.pk).exists()
    assert list(mod.lecturers.all()) == [other]

    mod.delete()
    assert Lecturer.objects.filter(pk=other.pk).exists()
    assert LecturerLearningModule.objects.count() == 0
