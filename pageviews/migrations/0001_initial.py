import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('pages', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ViewCollection',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'View Collection',
                'verbose_name_plural': 'View Collections',
            },
        ),
        migrations.CreateModel(
            name='ViewDefinition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name templates use to look up this view (case-sensitive)', max_length=100)),
                ('description', models.TextField(blank=True)),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('include_descendants', models.BooleanField(default=False, help_text='Include every descendant of the root page, not only its children')),
                ('published_only', models.BooleanField(default=True)),
                ('order_by', models.CharField(choices=[('sort_order', 'Menu order'), ('title', 'Title (A-Z)'), ('-title', 'Title (Z-A)'), ('created_at', 'Oldest first'), ('-created_at', 'Newest first')], default='sort_order', max_length=20)),
                ('limit', models.PositiveIntegerField(default=0, help_text='Maximum number of results (0 for unlimited)')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('collection', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='views', to='pageviews.viewcollection')),
                ('root_page', models.ForeignKey(blank=True, help_text='Only include pages below this page (all pages when empty)', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='pages.page')),
            ],
            options={
                'verbose_name': 'View Definition',
                'verbose_name_plural': 'View Definitions',
                'ordering': ['sort_order', 'id'],
                'constraints': [models.UniqueConstraint(fields=('collection', 'name'), name='pageviews_unique_view_name')],
            },
        ),
    ]
