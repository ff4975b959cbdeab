from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [('releases', '0001_initial')]

    operations = [
        migrations.AddField(
            model_name='release',
            name='archived',
            field=models.BooleanField(db_index=True, default=False),
        )
    ]
