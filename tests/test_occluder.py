import pytest

from unison2d.occluder import Occluder, OccluderEdge, ShadowFilter


def test_from_aabb_has_four_edges_with_outward_normals():
    occ = Occluder.from_aabb(2.0, 3.0, 1.0, 0.5)
    assert [e.normal for e in occ.edges] == [
        (0.0, -1.0),
        (1.0, 0.0),
        (0.0, 1.0),
        (-1.0, 0.0),
    ]


def test_from_aabb_edges_form_closed_loop():
    occ = Occluder.from_aabb(2.0, 3.0, 1.0, 0.5)
    edges = occ.edges
    for current, following in zip(edges, edges[1:] + edges[:1]):
        assert current.b == following.a


def test_from_aabb_corners_match_extents():
    cx, cy, hw, hh = 2.0, 3.0, 1.0, 0.5
    occ = Occluder.from_aabb(cx, cy, hw, hh)
    xs = {p[0] for e in occ.edges for p in (e.a, e.b)}
    ys = {p[1] for e in occ.edges for p in (e.a, e.b)}
    assert xs == {cx - hw, cx + hw}
    assert ys == {cy - hh, cy + hh}


def test_from_ground_single_downward_edge():
    occ = Occluder.from_ground(-4.5, -10.0, 10.0)
    assert occ.edges == [OccluderEdge((-10.0, -4.5), (10.0, -4.5), (0.0, -1.0))]


def test_from_boundary_edges_ccw_square_normals_point_outward():
    positions = [0.0, 0.0, 2.0, 0.0, 2.0, 2.0, 0.0, 2.0]
    occ = Occluder.from_boundary_edges(positions, [(0, 1), (1, 2), (2, 3), (3, 0)])
    center = (1.0, 1.0)
    for edge in occ.edges:
        mid = ((edge.a[0] + edge.b[0]) / 2, (edge.a[1] + edge.b[1]) / 2)
        outward = (mid[0] - center[0], mid[1] - center[1])
        assert edge.normal[0] * outward[0] + edge.normal[1] * outward[1] > 0
        assert edge.normal[0] ** 2 + edge.normal[1] ** 2 == pytest.approx(1.0)


def test_from_boundary_edges_keeps_endpoints():
    positions = [0.0, 0.0, 2.0, 0.0, 2.0, 2.0]
    occ = Occluder.from_boundary_edges(positions, [(1, 2)])
    assert occ.edges[0].a == (2.0, 0.0)
    assert occ.edges[0].b == (2.0, 2.0)


def test_from_boundary_edges_degenerate_edge_gets_up_normal():
    positions = [1.0, 1.0, 1.0, 1.0]
    occ = Occluder.from_boundary_edges(positions, [(0, 1)])
    assert occ.edges[0].normal == (0.0, 1.0)


def test_from_boundary_edges_bad_index_raises():
    with pytest.raises(IndexError):
        Occluder.from_boundary_edges([0.0, 0.0], [(0, 5)])


@pytest.mark.parametrize(
    "mode, value",
    [(ShadowFilter.NONE, 0), (ShadowFilter.PCF5, 5), (ShadowFilter.PCF13, 13)],
)
def test_shadow_filter_uniform_values(mode, value):
    assert mode.as_uniform_value() == value