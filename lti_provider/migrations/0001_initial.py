from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='LtiConsumer',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('consumer_name', models.CharField(blank=True, help_text='Name of the platform the launches come from.', max_length=255)),
                ('consumer_key', models.CharField(help_text='OAuth consumer key sent by the platform as oauth_consumer_key.', max_length=255, unique=True)),
                ('consumer_secret', models.CharField(help_text='Shared secret used to sign launches. Keep this value secret.', max_length=255)),
            ],
        ),
    ]
