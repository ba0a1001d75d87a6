from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StoredProperty',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('scope', models.CharField(choices=[('user', 'User'), ('document', 'Document')], max_length=16)),
                ('owner', models.CharField(max_length=255)),
                ('key', models.CharField(max_length=100)),
                ('value', models.TextField(blank=True, default='')),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.AddConstraint(
            model_name='storedproperty',
            constraint=models.UniqueConstraint(fields=('scope', 'owner', 'key'), name='unique_property_per_owner'),
        ),
    ]
