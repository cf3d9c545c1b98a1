"""Tests for dataset assembly, CSV rendering and polyline preview."""

import numpy as np
import pytest

from src.auscult_system.exceptions import InvalidParameterError
from src.auscult_system.schemas import DataPoint
from src.auscultation.dataset import (
    CSV_HEADER,
    build_dataset,
    format_csv,
    preview_polyline,
    series_values,
)
from src.auscultation.simulator import AuscultationSimulator


class TestBuildDataset:
    def test_point_count_and_series(self, simulator):
        points = build_dataset(simulator, "valve_disease", 50, 2, dataset_count=3)
        assert len(points) == 150
        assert sorted({p.series for p in points}) == [0, 1, 2]
        assert all(p.type == "valve_disease" for p in points)

    def test_timestamps_are_sample_indices(self, simulator):
        points = build_dataset(simulator, "normal_lung", 20, 2, dataset_count=2)
        assert [p.timestamp for p in points if p.series == 1] == list(range(20))

    def test_first_series_is_unmodified(self):
        points = build_dataset(AuscultationSimulator(seed=7), "normal_heart", 50, 2,
                               dataset_count=1)
        expected = AuscultationSimulator(seed=7).generate("normal_heart", 50, 2)
        np.testing.assert_array_equal(series_values(points, 0), expected)

    def test_unknown_condition_labelled_as_fallback(self, simulator):
        points = build_dataset(simulator, "mystery", 10, 1, dataset_count=1)
        assert {p.type for p in points} == {"normal_heart"}

    def test_invalid_dataset_count(self, simulator):
        with pytest.raises(InvalidParameterError):
            build_dataset(simulator, "normal_heart", 10, 1, dataset_count=0)

    def test_invalid_sample_count_propagates(self, simulator):
        with pytest.raises(InvalidParameterError):
            build_dataset(simulator, "normal_heart", 0, 1)


class TestFormatCsv:
    def test_header_and_rows(self):
        points = [
            DataPoint(timestamp=0, value=0.5, type="wheezes", series=0),
            DataPoint(timestamp=1, value=-0.25, type="wheezes", series=0),
        ]
        lines = format_csv(points).split("\n")
        assert lines[0] == CSV_HEADER == "timestamp,value,type,series"
        assert lines[1] == "0,0.5,wheezes,0"
        assert lines[2] == "1,-0.25,wheezes,0"

    def test_empty(self):
        assert format_csv([]) == CSV_HEADER


class TestPreviewPolyline:
    def test_scaling(self):
        assert preview_polyline([0.0, 1.0, -1.0]) == "0,50 50,10 100,90"

    def test_capped(self):
        pts = preview_polyline(np.ones(2000), max_points=1000).split(" ")
        assert len(pts) == 1000
        assert pts[-1] == "100,10"

    def test_flat_signal(self):
        assert preview_polyline(np.zeros(3)) == "0,50 50,50 100,50"

    def test_single_value(self):
        assert preview_polyline([2.0]) == "0,10"

    def test_empty(self):
        assert preview_polyline([]) == ""


class TestSeriesValues:
    def test_orders_by_timestamp(self):
        points = [
            DataPoint(timestamp=1, value=2.0, type="x", series=0),
            DataPoint(timestamp=0, value=1.0, type="x", series=0),
            DataPoint(timestamp=0, value=9.0, type="x", series=1),
        ]
        np.testing.assert_array_equal(series_values(points, 0), [1.0, 2.0])
