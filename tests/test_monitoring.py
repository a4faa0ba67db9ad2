# -*- coding: utf-8 -*-
"""
Tests for request statistics and helper utilities.
"""

from unittest.mock import patch

import pytest

from xrpl_sale.monitoring import PerformanceMonitor
from xrpl_sale.utils import encode_query, parse_bool, redact, validate_url


class TestPerformanceMonitor:

    def test_aggregates_statistics(self):
        monitor = PerformanceMonitor()
        monitor.record_request("/projects", "GET", 200, 10.0)
        monitor.record_request("/projects", "GET", 500, 30.0)
        monitor.record_request("/investments", "POST", 201, 20.0)

        stats = monitor.statistics
        assert stats.total_requests == 3
        assert stats.successful_requests == 2
        assert stats.failed_requests == 1
        assert stats.avg_duration_ms == pytest.approx(20.0)
        assert stats.min_duration_ms == 10.0
        assert stats.max_duration_ms == 30.0

        endpoint = monitor.get_endpoint_stats("/projects", "GET")
        assert endpoint.total_requests == 2
        assert monitor.get_endpoint_stats("/projects", "POST").total_requests == 0

    def test_history_is_bounded(self):
        monitor = PerformanceMonitor(max_history=2)
        for n in range(3):
            monitor.record_request(f"/projects/{n}", "GET", 200, 1.0)

        recent = monitor.get_recent_requests()
        assert [m.endpoint for m in recent] == ["/projects/1", "/projects/2"]
        assert monitor.statistics.total_requests == 3

    def test_endpoint_statistics_are_bounded(self):
        monitor = PerformanceMonitor(max_endpoints=3)
        for n in range(50):
            monitor.record_request(f"/projects/p{n}/stats", "GET", 200, 1.0)

        assert len(monitor._by_endpoint) == 3
        assert monitor.get_endpoint_stats("/projects/p0/stats", "GET").total_requests == 0
        assert monitor.get_endpoint_stats("/projects/p49/stats", "GET").total_requests == 1
        assert monitor.statistics.total_requests == 50

    def test_recently_used_endpoint_survives_eviction(self):
        monitor = PerformanceMonitor(max_endpoints=2)
        monitor.record_request("/projects", "GET", 200, 1.0)
        monitor.record_request("/investments", "GET", 200, 1.0)
        monitor.record_request("/projects", "GET", 200, 1.0)
        monitor.record_request("/analytics/platform", "GET", 200, 1.0)

        assert monitor.get_endpoint_stats("/projects", "GET").total_requests == 2
        assert monitor.get_endpoint_stats("/investments", "GET").total_requests == 0

    def test_endpoint_limit_defaults_to_history_size(self):
        monitor = PerformanceMonitor(max_history=5)
        for n in range(20):
            monitor.record_request(f"/webhooks/wh_{n}", "DELETE", 204, 1.0)

        assert len(monitor._by_endpoint) == 5

    def test_error_rate_uses_time_window(self):
        monitor = PerformanceMonitor()
        with patch("xrpl_sale.monitoring.time.time", return_value=1000.0):
            monitor.record_request("/projects", "GET", 500, 1.0)
        with patch("xrpl_sale.monitoring.time.time", return_value=1100.0):
            monitor.record_request("/projects", "GET", 200, 1.0)
            monitor.record_request("/projects", "GET", 429, 1.0)

            assert monitor.get_error_rate(window_seconds=60) == pytest.approx(0.5)
            assert monitor.get_error_rate(window_seconds=200) == pytest.approx(2 / 3)

    def test_empty_error_rate_and_reset(self):
        monitor = PerformanceMonitor()
        assert monitor.get_error_rate() == 0.0

        monitor.record_request("/projects", "GET", 200, 1.0)
        monitor.reset()

        assert monitor.statistics.total_requests == 0
        assert monitor.get_recent_requests() == []


class TestUtils:

    def test_encode_query(self):
        assert encode_query({"page": 2, "active": True, "closed": False, "status": None}) == {
            "page": "2",
            "active": "true",
            "closed": "false",
        }
        assert encode_query(None) == {}

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("TRUE", True), ("yes", True), ("on", True),
        ("0", False), ("false", False), ("", False), (True, True), (0, False),
    ])
    def test_parse_bool(self, value, expected):
        assert parse_bool(value) is expected

    @pytest.mark.parametrize("url,valid", [
        ("https://api.xrpl.sale/v1", True),
        ("http://localhost:8080", True),
        ("ftp://example.com", False),
        ("https://", False),
        (None, False),
    ])
    def test_validate_url(self, url, valid):
        assert validate_url(url) is valid

    def test_redact(self):
        assert redact("abcdef123456") == "abcd********"
        assert redact("abc") == "***"
        assert redact(None) == ""
