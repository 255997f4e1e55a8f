import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("community", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="recipepost",
            name="group",
            field=models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="posts", to="community.group"),
        ),
        migrations.AddField(
            model_name="recipepost",
            name="is_approved",
            field=models.BooleanField(default=True),
        ),
    ]
