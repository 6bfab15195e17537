from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Option',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Unique option name, e.g. irt_robots_txt.', max_length=191, unique=True)),
                ('value', models.TextField(blank=True, default='', help_text='The stored (sanitized) option value.')),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['name'],
                'permissions': [('manage_options', 'Can manage site settings')],
            },
        ),
    ]
