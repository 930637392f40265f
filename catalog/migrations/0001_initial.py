from django.db import migrations, models
import django.db.models.deletion

import catalog.models
import catalog.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LearningModule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("code", models.CharField(error_messages={"unique": "The code has already been taken."}, max_length=255, unique=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("photo", models.ImageField(blank=True, max_length=255, null=True, upload_to=catalog.models.learning_module_photo_path, validators=[catalog.validators.validate_photo])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "learning_modules",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Lecturer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("code", models.CharField(error_messages={"unique": "The code has already been taken."}, max_length=255, unique=True)),
                ("photo", models.ImageField(blank=True, max_length=255, null=True, upload_to=catalog.models.lecturer_photo_path, validators=[catalog.validators.validate_photo])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "lecturers",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="LecturerLearningModule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("learning_module", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="catalog.learningmodule")),
                ("lecturer", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="catalog.lecturer")),
            ],
            options={
                "db_table": "lecturer_learning_module",
                "constraints": [
                    models.UniqueConstraint(fields=("lecturer", "learning_module"), name="uniq_lecturer_learning_module"),
                ],
            },
        ),
        migrations.AddField(
            model_name="lecturer",
            name="learning_modules",
            field=models.ManyToManyField(blank=True, related_name="lecturers", through="catalog.LecturerLearningModule", to="catalog.learningmodule"),
        ),
    ]
