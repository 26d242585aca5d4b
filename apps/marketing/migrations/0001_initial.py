import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Campaign',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=200)),
                ('source', models.CharField(choices=[('facebook', 'Facebook'), ('instagram', 'Instagram'), ('mercadolibre', 'MercadoLibre'), ('gratuita', 'Gratuita')], default='facebook', max_length=20)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('cost', models.DecimalField(decimal_places=2, default=0, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ('contacto_inicial', models.PositiveIntegerField(default=0)),
                ('info_enviada', models.PositiveIntegerField(default=0)),
                ('contacto_personal', models.PositiveIntegerField(default=0)),
                ('registrado', models.PositiveIntegerField(default=0)),
                ('suscrito', models.PositiveIntegerField(default=0)),
            ],
            options={
                'db_table': 'campaigns',
                'ordering': ['-created_at'],
                'constraints': [models.CheckConstraint(condition=models.Q(('cost__gte', 0)), name='campaign_cost_non_negative')],
            },
        ),
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=200)),
                ('status', models.CharField(choices=[('contacto_inicial', 'Contacto inicial'), ('info_enviada', 'Info enviada'), ('contacto_personal', 'Contacto personal'), ('registrado', 'Registrado'), ('suscrito', 'Suscrito')], default='contacto_inicial', max_length=20)),
                ('campaign', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='leads', to='marketing.campaign')),
            ],
            options={
                'db_table': 'leads',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['campaign', 'status'], name='leads_campaign_status_idx')],
            },
        ),
    ]
