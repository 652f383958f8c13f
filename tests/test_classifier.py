"""Tests for the ordered rule chain and shape assembly."""

from __future__ import annotations

import pytest

from shape_detection import ShapeClassifier, ShapeType
from shape_detection.rules import VertexCountRule
from shape_detection.types import BoundingBox, Moments, Point

from . import contour_factory as factory


@pytest.fixture(scope="module")
def classifier() -> ShapeClassifier:
    return ShapeClassifier()


@pytest.mark.parametrize(
    "points",
    [
        factory.polygon(3),
        factory.polygon(4),
        factory.polygon(5),
        factory.polygon(8),
        factory.star(),
    ],
)
def test_small_contours_are_rejected_before_any_rule(classifier, points):
    contour = factory.make_contour(points, area=99.9, radius=5.6, is_convex=False)
    assert classifier.classify(contour) is None


def test_area_gate_is_inclusive_at_threshold(classifier):
    contour = factory.make_contour(factory.polygon(3), area=100.0)
    assert classifier.classify(contour).shape_type is ShapeType.TRIANGLE


@pytest.mark.parametrize(
    ("sides", "shape_type"),
    [(3, ShapeType.TRIANGLE), (4, ShapeType.RECTANGLE), (5, ShapeType.PENTAGON)],
)
def test_low_vertex_counts_use_fixed_confidence(classifier, sides, shape_type):
    box = BoundingBox(3, 4, 120, 90)
    contour = factory.make_contour(factory.polygon(sides), area=4321.5, bounding_box=box)
    shape = classifier.classify(contour)
    assert shape is not None
    assert shape.shape_type is shape_type
    assert shape.confidence == 0.85
    assert shape.bounding_box == box
    assert shape.area == 4321.5
    assert shape.center == Point(60.0, 60.0)


@pytest.mark.parametrize("points", [[], [(1, 1)], [(1, 1), (50, 50)]])
def test_degenerate_approximations_are_discarded(classifier, points):
    contour = factory.make_contour(points, area=5000.0)
    assert classifier.classify(contour) is None


def test_circle_confidence_is_area_ratio(classifier):
    contour = factory.make_contour(factory.polygon(8), area=7850.0, radius=50.0)
    shape = classifier.classify(contour)
    assert shape.shape_type is ShapeType.CIRCLE
    assert shape.confidence == pytest.approx(0.99949, abs=1e-5)


def test_circle_takes_precedence_over_star(classifier):
    contour = factory.make_contour(factory.star(), area=7850.0, radius=50.0, is_convex=False)
    assert classifier.classify(contour).shape_type is ShapeType.CIRCLE


def test_star_is_detected_after_circle_test_fails(classifier):
    contour = factory.make_contour(factory.star(), area=2000.0, radius=50.0, is_convex=False)
    shape = classifier.classify(contour)
    assert shape.shape_type is ShapeType.STAR
    assert shape.confidence == pytest.approx(1.0)


def test_twelve_vertex_star_is_never_classified(classifier):
    contour = factory.make_contour(factory.star(tips=6), area=3000.0, radius=50.0, is_convex=False)
    assert classifier.classify(contour) is None


def test_convex_many_sided_low_ratio_is_discarded(classifier):
    contour = factory.make_contour(factory.polygon(10), area=3000.0, radius=50.0, is_convex=True)
    assert classifier.classify(contour) is None


def test_degenerate_moments_skip_contour(classifier):
    contour = factory.make_contour(factory.polygon(3), area=500.0, moments=Moments(0.0, 0.0, 0.0))
    assert classifier.classify(contour) is None


def test_classification_is_deterministic(classifier):
    contour = factory.make_contour(factory.star(inner_radii=[15.0, 17.0, 19.0, 21.0, 19.0]), area=2000.0, is_convex=False)
    first = classifier.classify(contour)
    second = classifier.classify(contour)
    assert first is not None
    assert first == second
    assert first.confidence == second.confidence


def test_unclamped_circle_confidence_can_exceed_one(classifier):
    contour = factory.make_contour(factory.polygon(12), area=8000.0, radius=50.0)
    assert classifier.classify(contour).confidence > 1.0


def test_clamped_circle_confidence_is_capped():
    classifier = ShapeClassifier(clamp_confidence=True)
    contour = factory.make_contour(factory.polygon(12), area=8000.0, radius=50.0)
    assert classifier.classify(contour).confidence == 1.0


def test_clamping_leaves_in_range_confidence_alone():
    classifier = ShapeClassifier(clamp_confidence=True)
    contour = factory.make_contour(factory.polygon(4), area=500.0)
    assert classifier.classify(contour).confidence == 0.85


def test_classify_all_preserves_order_and_drops_misses(classifier):
    contours = [
        factory.make_contour(factory.polygon(4), area=500.0),
        factory.make_contour(factory.polygon(3), area=50.0),
        factory.make_contour(factory.polygon(3), area=500.0),
        factory.make_contour(factory.star(tips=6), area=3000.0, is_convex=False),
        factory.make_contour(factory.polygon(5), area=500.0),
    ]
    shapes = classifier.classify_all(contours)
    assert [shape.shape_type for shape in shapes] == [
        ShapeType.RECTANGLE,
        ShapeType.TRIANGLE,
        ShapeType.PENTAGON,
    ]


def test_custom_rules_replace_defaults():
    classifier = ShapeClassifier(rules=[VertexCountRule(ShapeType.TRIANGLE, 3, confidence=0.5)], min_area=10.0)
    assert classifier.classify(factory.make_contour(factory.polygon(3), area=20.0)).confidence == 0.5
    assert classifier.classify(factory.make_contour(factory.polygon(4), area=20.0)) is None
    assert classifier.supported_shapes() == [ShapeType.TRIANGLE]


def test_default_supported_shapes(classifier):
    assert set(classifier.supported_shapes()) == set(ShapeType)


def test_to_dict_exposes_output_record(classifier):
    box = BoundingBox(1, 2, 3, 4)
    shape = classifier.classify(factory.make_contour(factory.polygon(3), area=150.0, bounding_box=box))
    assert shape.to_dict() == {
        "type": "triangle",
        "confidence": 0.85,
        "bounding_box": {"x": 1, "y": 2, "width": 3, "height": 4},
        "center": {"x": 60.0, "y": 60.0},
        "area": 150.0,
    }


def test_empty_rule_list_matches_nothing():
    classifier = ShapeClassifier(rules=[])
    assert classifier.rules == []
    assert classifier.classify(factory.make_contour(factory.polygon(3), area=500.0)) is None
    assert classifier.supported_shapes() == []
