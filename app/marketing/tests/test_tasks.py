"""
Tests for marketing Celery tasks and their celery-beat schedules.
"""

from unittest.mock import patch

import pytest
from django_celery_beat.models import PeriodicTask

from marketing.services import MONTHLY_PROMOTIONS, WEEKLY_NEWSLETTER
from marketing.tasks import send_monthly_promotions, send_weekly_newsletter
from notifications.dispatch import CampaignRunResult


class TestTaskConfiguration:
    def test_tasks_are_registered(self):
        assert send_weekly_newsletter.name == "marketing.tasks.send_weekly_newsletter"
        assert send_monthly_promotions.name == "marketing.tasks.send_monthly_promotions"


@patch("marketing.tasks.MarketingCampaign")
class TestMarketingTasks:
    def test_weekly_newsletter_runs_newsletter_edition(self, mock_campaign):
        mock_campaign.return_value.run.return_value = CampaignRunResult(sent=7)

        result = send_weekly_newsletter.apply().get()

        assert result == {"sent": 7, "failed": 0, "error": None}
        mock_campaign.assert_called_once_with(WEEKLY_NEWSLETTER)

    def test_monthly_promotions_runs_promotions_edition(self, mock_campaign):
        mock_campaign.return_value.run.return_value = CampaignRunResult(error="timeout")

        result = send_monthly_promotions.apply().get()

        assert result == {"sent": 0, "failed": 0, "error": "timeout"}
        mock_campaign.assert_called_once_with(MONTHLY_PROMOTIONS)


@pytest.mark.django_db
class TestBeatSchedules:
    """The data migration installs both crontab schedules."""

    def test_newsletter_runs_mondays_at_nine(self):
        task = PeriodicTask.objects.get(name="Send Weekly Newsletter")

        assert task.task == "marketing.tasks.send_weekly_newsletter"
        assert task.enabled is True
        assert (task.crontab.minute, task.crontab.hour) == ("0", "9")
        assert task.crontab.day_of_week == "1"
        assert task.crontab.day_of_month == "*"

    def test_promotions_run_on_the_first_at_ten(self):
        task = PeriodicTask.objects.get(name="Send Monthly Promotions")

        assert task.task == "marketing.tasks.send_monthly_promotions"
        assert (task.crontab.minute, task.crontab.hour) == ("0", "10")
        assert task.crontab.day_of_week == "*"
        assert task.crontab.day_of_month == "1"
