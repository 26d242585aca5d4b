import pytest
from django.test import Client
from django.urls import reverse

from apps.marketing.models import Campaign
from apps.projects.models import Project


@pytest.mark.django_db
class TestSecurity:

    # --- 1. 데이터 변경은 POST 만 허용 ---

    @pytest.mark.parametrize("url_name,args", [
        ('projects:project_create', []),
        ('projects:project_status_update', [1]),
        ('projects:project_delete', [1]),
        ('projects:task_create', []),
        ('projects:task_status_update', [1]),
        ('projects:task_delete', [1]),
        ('marketing:campaign_create', []),
        ('marketing:campaign_stage_update', [1]),
        ('marketing:lead_create', [1]),
        ('marketing:lead_status_update', [1]),
        ('evolution:evolution_create', []),
        ('evolution:evolution_update_field', [1]),
        ('costs:cost_create', []),
        ('costs:cost_delete', [1]),
    ])
    def test_mutations_reject_get(self, client, url_name, args):
        """GET 으로 생성/수정/삭제가 일어나지 않는지"""
        response = client.get(reverse(url_name, args=args))
        assert response.status_code == 405

    def test_get_does_not_delete(self, client):
        project = Project.objects.create(name='P')

        client.get(reverse('projects:project_delete', args=[project.pk]))

        assert Project.objects.filter(pk=project.pk).exists()

    # --- 2. 관리자 화면은 로그인 필요 ---

    def test_admin_requires_login(self, client):
        response = client.get('/admin/')
        assert response.status_code == 302
        assert '/admin/login/' in response.url

    # --- 3. 외부 URL 로 리다이렉트하지 않음 ---

    def test_stage_update_ignores_external_next(self, client):
        campaign = Campaign.objects.create(name='C', start_date='2024-01-01', end_date='2024-01-31')

        response = client.post(reverse('marketing:campaign_stage_update', args=[campaign.pk]), {
            'stage': 'registrado',
            'value': '1',
            'next': '//evil.example.com/',
        })

        assert response.status_code == 302
        assert 'evil.example.com' not in response.url

    # --- 4. CSRF ---

    def test_csrf_enforced(self):
        csrf_client = Client(enforce_csrf_checks=True)
        response = csrf_client.post(reverse('costs:cost_create'), {
            'description': 'x', 'amount': '1', 'frequency': 'monthly', 'start_date': '2024-01-01',
        })

        assert response.status_code == 403
