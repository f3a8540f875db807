"""Tests for datashare_report.datashare.models."""

from datetime import UTC, datetime, timedelta, timezone

from datashare_report.datashare.models import Page, Share, ShareSynchronization, _parse_dt


class TestParseDt:
    """Tests for ARM timestamp parsing."""

    def test_none(self):
        assert _parse_dt(None) is None

    def test_empty(self):
        assert _parse_dt("") is None

    def test_zulu(self):
        assert _parse_dt("2024-05-01T10:00:00Z") == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    def test_seven_fractional_digits(self):
        parsed = _parse_dt("2024-05-01T10:00:00.1234567Z")
        assert parsed.replace(microsecond=0) == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)
        assert parsed.microsecond == 123456

    def test_offset_preserved(self):
        parsed = _parse_dt("2024-05-01T10:00:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

    def test_naive_assumed_utc(self):
        assert _parse_dt("2024-05-01T10:00:00").tzinfo == UTC

    def test_invalid(self):
        assert _parse_dt("not a date") is None


class TestShare:
    """Tests for Share.from_api."""

    def test_from_api(self):
        share = Share.from_api(
            {
                "id": "/subscriptions/s/.../shares/sales",
                "name": "sales",
                "properties": {"shareKind": "InPlace", "createdAt": "2023-11-02T09:00:00Z"},
            }
        )

        assert share == Share(name="sales")

    def test_from_api_missing_name(self):
        assert Share.from_api({}).name == ""


class TestShareSynchronization:
    """Tests for ShareSynchronization.from_api."""

    def test_from_api(self):
        sync = ShareSynchronization.from_api(
            {
                "consumerTenantName": "Contoso",
                "consumerName": "Ops",
                "startTime": "2024-05-01T10:00:00Z",
                "status": "Succeeded",
            }
        )

        assert sync.consumer_tenant_name == "Contoso"
        assert sync.start_time == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    def test_missing_start_time(self):
        sync = ShareSynchronization.from_api({"consumerTenantName": "Contoso"})

        assert sync.start_time is None

    def test_missing_tenant_name(self):
        assert ShareSynchronization.from_api({}).consumer_tenant_name == ""


class TestPage:
    """Tests for Page defaults."""

    def test_defaults(self):
        page = Page()

        assert page.items == []
        assert page.next_link is None
