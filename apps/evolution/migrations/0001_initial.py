import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ClientEvolution',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('month', models.DateField(default=django.utils.timezone.localdate)),
                ('month_text', models.CharField(choices=[('Enero', 'Enero'), ('Febrero', 'Febrero'), ('Marzo', 'Marzo'), ('Abril', 'Abril'), ('Mayo', 'Mayo'), ('Junio', 'Junio'), ('Julio', 'Julio'), ('Agosto', 'Agosto'), ('Septiembre', 'Septiembre'), ('Octubre', 'Octubre'), ('Noviembre', 'Noviembre'), ('Diciembre', 'Diciembre')], max_length=20, unique=True)),
                ('active_clients', models.IntegerField(default=0)),
                ('trial_clients', models.IntegerField(default=0)),
                ('paid_clients', models.IntegerField(default=0)),
                ('expenses', models.IntegerField(default=0)),
                ('income', models.IntegerField(default=0, editable=False)),
                ('net_income', models.IntegerField(default=0, editable=False)),
                ('profit_per_partner', models.IntegerField(default=0, editable=False)),
            ],
            options={
                'db_table': 'client_evolution',
                'ordering': ['month'],
            },
        ),
    ]
