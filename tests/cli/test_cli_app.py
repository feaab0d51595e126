"""
Tests for the traveltime command
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from traveltime.cli.app import app
from traveltime.commute.service import CommuteService
from traveltime.core.errors import NetworkError, UpstreamError
from traveltime.core.models import Coordinate, Deviation, NamedPoint, TravelResult

runner = CliRunner()


@pytest.fixture
def env():
    """Environment for a successful run"""
    return {
        "GOOGLE_API_KEY": "test_key",
        "TRAVEL_WORK_COORD": "work,52.5096,13.3759",
        "TRAVEL_HOME_COORD": "home,52.5219,13.4132",
        "TRAVEL_FORMAT_OUTPUT": None,
        "TRAVEL_TIMEOUT": None,
        "TRAVEL_LOG_LEVEL": None,
    }


@pytest.fixture
def travel_result():
    return TravelResult(
        origin=NamedPoint(name="home", coordinate=Coordinate(lat=52.5219, lng=13.4132)),
        destination=NamedPoint(name="work", coordinate=Coordinate(lat=52.5096, lng=13.3759)),
        with_traffic=110,
        no_traffic=100,
        deviation=Deviation(relative="+10%", absolute="+10"),
    )


class TestTravelTimeCommand:
    """Test the traveltime command"""
    
    def test_default_output(self, env, travel_result):
        """Test successful run with the default template"""
        with patch.object(CommuteService, "resolve", new_callable=AsyncMock) as mock_resolve:
            mock_resolve.return_value = travel_result
            
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 0
        assert result.stdout == "home: 110 +10min\n"
        
        call_kwargs = mock_resolve.call_args[1]
        assert call_kwargs["work"].name == "work"
        assert call_kwargs["home"].name == "home"
    
    def test_custom_output(self, env, travel_result):
        """Test successful run with a custom template"""
        env["TRAVEL_FORMAT_OUTPUT"] = "[{{ .Origin.Name }} -> {{ .Destination.Name }}] {{ .NoTraffic }}min :car: {{ .Deviation.Relative }}"
        
        with patch.object(CommuteService, "resolve", new_callable=AsyncMock) as mock_resolve:
            mock_resolve.return_value = travel_result
            
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 0
        assert result.stdout == "[home -> work] 100min :car: +10%\n"
    
    def test_output_is_written_unchanged(self, env, travel_result):
        """Test tabs in the template reach stdout as tabs"""
        env["TRAVEL_FORMAT_OUTPUT"] = "{{Origin.Name}}\t{{WithTraffic}}"
        
        with patch.object(CommuteService, "resolve", new_callable=AsyncMock) as mock_resolve:
            mock_resolve.return_value = travel_result
            
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 0
        assert result.stdout == "home\t110\n"
    
    @pytest.mark.parametrize("name", ["GOOGLE_API_KEY", "TRAVEL_WORK_COORD", "TRAVEL_HOME_COORD"])
    def test_missing_variable(self, env, name):
        """Test missing variables exit non-zero naming the variable"""
        env[name] = None
        
        with patch.object(CommuteService, "resolve", new_callable=AsyncMock) as mock_resolve:
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 1
        assert name in result.output
        mock_resolve.assert_not_called()
    
    def test_invalid_coordinate(self, env):
        """Test malformed coordinates exit non-zero"""
        env["TRAVEL_WORK_COORD"] = "bad,1,2,3"
        
        result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 1
        assert "must contain 2 ','" in result.output
    
    def test_invalid_template_fails_before_network(self, env):
        """Test template errors are reported before any API call"""
        env["TRAVEL_FORMAT_OUTPUT"] = "{{ .Origin.Address }}"
        
        with patch.object(CommuteService, "resolve", new_callable=AsyncMock) as mock_resolve:
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 1
        assert "unknown field" in result.output
        mock_resolve.assert_not_called()
    
    @pytest.mark.parametrize("error", [
        NetworkError("Failed to fetch geolocation: connection refused"),
        UpstreamError("No route from a to b: ZERO_RESULTS"),
    ])
    def test_upstream_failure(self, env, error):
        """Test upstream failures exit non-zero without output"""
        with patch.object(CommuteService, "resolve", new_callable=AsyncMock) as mock_resolve:
            mock_resolve.side_effect = error
            
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 1
        assert str(error) in result.output
        assert "min" not in result.stdout
    
    def test_timeout_budget(self, env):
        """Test slow upstream calls are aborted"""
        env["TRAVEL_TIMEOUT"] = "0.05"
        
        async def slow_resolve(*args, **kwargs):
            await asyncio.sleep(5)
        
        with patch.object(CommuteService, "resolve", side_effect=slow_resolve):
            result = runner.invoke(app, [], env=env)
        
        assert result.exit_code == 1
        assert "did not finish within 0.05s" in result.output
