from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction as db_transaction

from apps.core.utils import MONTH_NAMES
from apps.costs.models import CostEntry
from apps.evolution.models import ClientEvolution
from apps.marketing.models import Campaign, FunnelStage, Lead
from apps.projects.models import Priority, Project, Task, WorkStatus


class Command(BaseCommand):
    help = '대시보드 예시 데이터 생성 (고객 추이는 월별로 한 번만 생성)'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, default=date.today().year, help='기준 연도')
        parser.add_argument('--months', type=int, default=6, help='고객 추이 생성 개월 수 (1~12)')

    @db_transaction.atomic
    def handle(self, *args, **options):
        year = options['year']
        months = max(1, min(options['months'], 12))

        self.stdout.write("=== 예시 데이터 생성 시작 ===")

        # 1. 프로젝트 / 작업
        project, created = Project.objects.get_or_create(
            name='Lanzamiento plataforma',
            defaults={
                'description': 'Proyecto de ejemplo',
                'start_date': date(year, 1, 1),
                'status': WorkStatus.IN_PROGRESS,
            }
        )
        if created:
            start = date(year, 1, 8)
            samples = [
                ('Diseño de marca', WorkStatus.COMPLETED, Priority.HIGH, 'maxi', 7),
                ('Landing page', WorkStatus.IN_PROGRESS, Priority.MEDIUM, 'tomas', 14),
                ('Campaña de lanzamiento', WorkStatus.PENDING, Priority.LOW, 'leandro', 10),
            ]
            for idx, (title, status, priority, assignee, days) in enumerate(samples):
                task_start = start + timedelta(days=idx * 7)
                Task.objects.create(
                    project=project,
                    title=title,
                    status=status,
                    priority=priority,
                    assigned_to=assignee,
                    start_date=task_start,
                    due_date=task_start + timedelta(days=days),
                )
            self.stdout.write(f"  프로젝트/작업 생성: {project.name} ({len(samples)}건)")

        # 2. 캠페인 / 리드
        campaign, created = Campaign.objects.get_or_create(
            name='Facebook verano',
            defaults={
                'source': 'facebook',
                'start_date': date(year, 1, 1),
                'end_date': date(year, 2, 28),
                'cost': Decimal('50000.00'),
                'contacto_inicial': 120,
                'info_enviada': 80,
                'contacto_personal': 30,
                'registrado': 12,
                'suscrito': 5,
            }
        )
        if created:
            for name, stage in [('Ana', FunnelStage.SUSCRITO), ('Bruno', FunnelStage.REGISTRADO),
                                ('Carla', FunnelStage.CONTACTO_INICIAL)]:
                Lead.objects.create(campaign=campaign, name=name, status=stage)
            self.stdout.write(f"  캠페인 생성: {campaign.name}")

        # 3. 고객 추이 (이미 있는 월은 건너뜀)
        evolution_count = 0
        for month in range(1, months + 1):
            _, created = ClientEvolution.objects.get_or_create(
                month_text=MONTH_NAMES[month - 1],
                defaults={
                    'month': date(year, month, 1),
                    'active_clients': 20 + month * 3,
                    'trial_clients': 5 + month,
                    'paid_clients': 10 + month * 2,
                    'expenses': 150000 + month * 10000,
                }
            )
            if created:
                evolution_count += 1
        self.stdout.write(f"  고객 추이 생성: {evolution_count}개월")

        # 4. 고정비
        cost_count = 0
        for description, amount, frequency in [
            ('Hosting', Decimal('15000.00'), 'monthly'),
            ('Dominio', Decimal('12000.00'), 'annual'),
            ('Herramientas', Decimal('30000.00'), 'monthly'),
        ]:
            _, created = CostEntry.objects.get_or_create(
                description=description,
                defaults={'amount': amount, 'frequency': frequency, 'start_date': date(year, 1, 1)}
            )
            if created:
                cost_count += 1
        self.stdout.write(f"  고정비 생성: {cost_count}건")

        self.stdout.write(self.style.SUCCESS("✅ 완료!"))
