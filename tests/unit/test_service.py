"""Unit tests for the analytics service facade."""

from datetime import datetime, timedelta

import pytest

from babysync_analytics.clock import FixedClock
from babysync_analytics.models import DateRangeSelector, VolumeUnit
from babysync_analytics.services import AnalyticsService
from babysync_analytics.settings import Settings


class CountingClock:
    """Clock that advances one hour per call and records how often it is read."""

    def __init__(self, start: datetime):
        self.current = start
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        moment = self.current
        self.current += timedelta(hours=1)
        return moment


@pytest.fixture
def service(reference_time) -> AnalyticsService:
    return AnalyticsService(clock=FixedClock(reference_time))


@pytest.fixture
def sleeps(sample_day_events):
    return [event for event in sample_day_events if event.type == "sleep"]


@pytest.fixture
def feeds(sample_day_events):
    return [event for event in sample_day_events if event.type == "feed"]


class TestReferenceTime:
    """Each call reads the clock once and shares that instant."""

    def test_report_samples_clock_once(self, sleeps, feeds, baby_4_months):
        clock = CountingClock(datetime(2024, 5, 15, 23, 30))
        service = AnalyticsService(clock=clock)

        report = service.report(sleeps, feeds, baby_4_months, DateRangeSelector.TODAY)

        assert clock.calls == 1
        assert report.reference_time == datetime(2024, 5, 15, 23, 30)
        assert report.sleep.date_range == report.feeding.date_range
        assert report.sleep.date_range.start == datetime(2024, 5, 15)

    @pytest.mark.parametrize(
        "method", ["sleep_analytics", "feeding_analytics", "wake_windows"]
    )
    def test_single_computations_sample_clock_once(
        self, method, sleeps, baby_4_months
    ):
        clock = CountingClock(datetime(2024, 5, 15, 18))
        service = AnalyticsService(clock=clock)

        if method == "wake_windows":
            service.wake_windows(sleeps, baby_4_months)
        else:
            getattr(service, method)([], baby_4_months, DateRangeSelector.WEEK)

        assert clock.calls == 1


class TestServiceComputations:
    def test_sleep_analytics(self, service, sleeps, baby_4_months):
        result = service.sleep_analytics(sleeps, baby_4_months, DateRangeSelector.TODAY)

        assert result.baby_id == "baby-1"
        assert result.total_sleep_hours == pytest.approx(2.5)
        assert result.nap_count == 2
        assert result.ongoing_sleep_count == 1

    def test_feeding_analytics_custom_range(self, service, feeds, baby_4_months):
        result = service.feeding_analytics(
            feeds,
            baby_4_months,
            DateRangeSelector.CUSTOM,
            custom_start=datetime(2024, 5, 15, 6),
            custom_end=datetime(2024, 5, 15, 12),
        )

        assert result.total_feedings == 2
        assert result.total_volume == pytest.approx(9.0)

    def test_wake_windows(self, service, sleeps, baby_4_months):
        windows = service.wake_windows(sleeps, baby_4_months)

        # Night sleep ends 06:00, naps 09:00-10:30 and 13:00-14:00
        assert [w.duration_minutes for w in windows] == [180, 150]
        assert [w.ordinal for w in windows] == [1, 2]

    def test_day_summary_defaults_to_clock_day(self, service, sample_day_events):
        summary = service.day_summary(sample_day_events)

        assert summary.date == datetime(2024, 5, 15)
        assert summary.diaper_count == 2

    def test_day_summary_uses_configured_unit(self, reference_time, sample_day_events):
        service = AnalyticsService(
            Settings(volume_unit=VolumeUnit.ML), FixedClock(reference_time)
        )

        summary = service.day_summary(sample_day_events, datetime(2024, 5, 15))

        assert summary.total_volume == pytest.approx(9.0 * 29.5735)

    def test_targets_follow_age(self, service, make_baby):
        assert service.sleep_target(make_baby(4)).lower == 12
        assert service.feeding_target(make_baby(4)).upper == 40
        assert service.sleep_target(make_baby(1)).upper == 17

    def test_report_includes_targets(self, service, sleeps, feeds, baby_4_months):
        report = service.report(sleeps, feeds, baby_4_months, DateRangeSelector.WEEK)

        assert (report.sleep_target.lower, report.sleep_target.upper) == (12, 15)
        assert (report.feeding_target.lower, report.feeding_target.upper) == (25, 40)
        assert report.feeding.total_feedings == 3
        # The Tuesday night sleep falls inside this week
        assert report.sleep.total_sleep_hours == pytest.approx(12.5)
