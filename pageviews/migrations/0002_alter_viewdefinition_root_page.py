import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('pages', '0002_view_collections'),
        ('pageviews', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='viewdefinition',
            name='root_page',
            field=models.ForeignKey(blank=True, help_text='Only include pages below this page (all pages when empty). Deleting the page deletes the view.', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='pages.page'),
        ),
    ]
