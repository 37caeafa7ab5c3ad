"""Unit tests for point time series extraction."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from s2inspector.api.timeseries import SeriesPoint, build_point_series, extract_ndvi_series


@pytest.fixture
def mock_ee():
    with patch("s2inspector.api.timeseries.ee") as mock:
        yield mock


class TestBuildPointSeries:
    """Tests for the deferred per-image sampling."""

    def test_masked_samples_dropped_and_sorted(self, mock_ee):
        """Test that null samples are filtered out and rows sorted by time."""
        collection = MagicMock()
        point = MagicMock()

        result = build_point_series(collection, point)

        mock_ee.FeatureCollection.assert_called_once_with(collection.map.return_value)
        mock_ee.Filter.notNull.assert_called_once_with(["ndvi"])
        features = mock_ee.FeatureCollection.return_value
        features.filter.assert_called_once_with(mock_ee.Filter.notNull.return_value)
        features.filter.return_value.sort.assert_called_once_with("time")
        assert result is features.filter.return_value.sort.return_value

    def test_each_image_sampled_at_point(self, mock_ee):
        """Test the function mapped over the collection."""
        collection = MagicMock()
        point = MagicMock()
        build_point_series(collection, point, scale=20)
        sample = collection.map.call_args[0][0]
        image = MagicMock()

        feature = sample(image)

        image.select.assert_called_once_with("NDVI")
        image.select.return_value.reduceRegion.assert_called_once_with(reducer=mock_ee.Reducer.mean.return_value, geometry=point, scale=20)
        value = image.select.return_value.reduceRegion.return_value.get.return_value
        image.get.assert_called_once_with("system:time_start")
        mock_ee.Feature.assert_called_once_with(None, {"time": image.get.return_value, "ndvi": value})
        assert feature is mock_ee.Feature.return_value


class TestExtractNdviSeries:
    """Tests for extract_ndvi_series."""

    def test_rows_converted_to_series_points(self, mock_ee):
        """Test conversion of (time ms, ndvi) rows."""
        rows = mock_ee.FeatureCollection.return_value.filter.return_value.sort.return_value.reduceColumns.return_value.get.return_value
        rows.getInfo.return_value = [[1577836800000, 0.42], [1580515200000, 0.77]]

        series = extract_ndvi_series(MagicMock(), MagicMock())

        assert series == [
            SeriesPoint(date=datetime(2020, 1, 1, tzinfo=timezone.utc), ndvi=0.42),
            SeriesPoint(date=datetime(2020, 2, 1, tzinfo=timezone.utc), ndvi=0.77),
        ]
        mock_ee.Reducer.toList.assert_called_once_with(2)

    def test_empty_series(self, mock_ee):
        """Test a point with no valid observations."""
        rows = mock_ee.FeatureCollection.return_value.filter.return_value.sort.return_value.reduceColumns.return_value.get.return_value
        rows.getInfo.return_value = []

        assert extract_ndvi_series(MagicMock(), MagicMock()) == []
