import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('pages', '0001_initial'),
        ('pageviews', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='page',
            name='view_collection',
            field=models.OneToOneField(blank=True, editable=False, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='pageviews.viewcollection'),
        ),
        migrations.AddField(
            model_name='siteconfig',
            name='view_collection',
            field=models.OneToOneField(blank=True, editable=False, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='pageviews.viewcollection'),
        ),
    ]
