"""BezNode / BezCubeChain validation tests."""

import dataclasses

import pytest

from nbez.chain import BezCubeChain, BezNode, NodeKind
from nbez.exceptions import BadNodePattern, ChainError, DomainError, InvalidLength
from nbez.fixed import Bez3o2d
from nbez.point import Point2d

A = BezNode.anchor
C = BezNode.control


@pytest.fixture
def two_segments():
    return [
        A(0.0, 0.0), C(1.0, 2.0), C(2.0, 2.0), A(3.0, 0.0),
        C(4.0, -2.0), C(5.0, -2.0), A(6.0, 0.0),
    ]


class TestBezNode:
    def test_roles(self):
        assert A(1.0, 2.0).is_anchor
        assert not A(1.0, 2.0).is_control
        assert C(1.0, 2.0).is_control
        assert C(1.0, 2.0).kind is NodeKind.CONTROL

    def test_default_kind_is_anchor(self):
        assert BezNode(1.0, 2.0).is_anchor

    def test_coordinates(self):
        node = C(1.5, -2.0)
        assert node.as_tuple() == (1.5, -2.0)
        assert node.as_point() == Point2d(1.5, -2.0)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            A(0.0, 0.0).x = 1.0


class TestFromContainer:
    def test_valid_chain(self, two_segments):
        chain = BezCubeChain.from_container(two_segments)
        assert len(chain) == 7
        assert chain.segment_count == 2
        assert chain.unwrap() is two_segments

    @pytest.mark.parametrize("length", [0, 2, 3, 5, 6, 8])
    def test_invalid_length(self, two_segments, length):
        nodes = (two_segments * 2)[:length]
        with pytest.raises(InvalidLength) as exc_info:
            BezCubeChain.from_container(nodes)
        assert exc_info.value.length == length

    def test_control_tagged_as_anchor(self, two_segments):
        two_segments[1] = A(1.0, 2.0)
        with pytest.raises(BadNodePattern) as exc_info:
            BezCubeChain.from_container(two_segments)
        assert exc_info.value.segment == 0

    def test_bad_second_segment(self, two_segments):
        two_segments[6] = C(6.0, 0.0)
        with pytest.raises(BadNodePattern) as exc_info:
            BezCubeChain.from_container(two_segments)
        assert exc_info.value.segment == 1

    def test_shared_anchor_tagged_as_control(self, two_segments):
        two_segments[3] = C(3.0, 0.0)
        with pytest.raises(BadNodePattern):
            BezCubeChain.from_container(two_segments)

    def test_failure_leaves_container_untouched(self, two_segments):
        two_segments[2] = A(2.0, 2.0)
        snapshot = list(two_segments)
        with pytest.raises(ChainError):
            BezCubeChain.from_container(two_segments)
        assert two_segments == snapshot

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            BezCubeChain.from_container([A(0.0, 0.0), A(1.0, 1.0)])

    def test_single_node_warns(self):
        with pytest.warns(UserWarning):
            chain = BezCubeChain.from_container([A(0.0, 0.0)])
        assert chain.segment_count == 0

    def test_tuple_container(self, two_segments):
        chain = BezCubeChain.from_container(tuple(two_segments))
        assert chain.segment_count == 2


class TestUnchecked:
    def test_skips_validation(self):
        nodes = [C(0.0, 0.0), C(1.0, 1.0)]
        chain = BezCubeChain.from_container_unchecked(nodes)
        assert chain.container is nodes


class TestSegments:
    def test_segments_share_anchors(self, two_segments):
        first, second = BezCubeChain.from_container(two_segments).segments()
        assert first == tuple(two_segments[0:4])
        assert second == tuple(two_segments[3:7])
        assert first[-1] is second[0]

    def test_segment_index_out_of_range(self, two_segments):
        with pytest.raises(IndexError):
            BezCubeChain.from_container(two_segments).segment(2)

    def test_curves(self, two_segments):
        curves = list(BezCubeChain.from_container(two_segments).curves())
        assert len(curves) == 2
        assert all(isinstance(c, Bez3o2d) for c in curves)
        assert curves[1].start == Point2d(3.0, 0.0)
        assert curves[1].end == Point2d(6.0, 0.0)

    def test_interp(self, two_segments):
        chain = BezCubeChain.from_container(two_segments)
        assert chain.interp(0.0) == Point2d(0.0, 0.0)
        assert chain.interp(0.5) == Point2d(3.0, 0.0)
        assert chain.interp(1.0) == Point2d(6.0, 0.0)
        p = chain.interp(0.25)
        assert p.x == pytest.approx(1.5)
        assert p.y == pytest.approx(1.5)

    def test_interp_domain(self, two_segments):
        with pytest.raises(DomainError):
            BezCubeChain.from_container(two_segments).interp(1.1)

    def test_interp_without_segments(self):
        chain = BezCubeChain.from_container_unchecked([A(0.0, 0.0)])
        with pytest.raises(ValueError):
            chain.interp(0.5)
