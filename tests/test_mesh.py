import pytest

from subsim.mesh import Face, Mesh, load_mesh, parse_mesh

SAMPLE = [
    "# a comment\n",
    "v 0.0 0.0 0.0\n",
    "v 1.5 0.0 0.0\n",
    "v 0.0 2.5 0.0\n",
    "vn 0.0 0.0 1.0\n",
    "vn 0.0 1.0 0.0\n",
    "f 1//1 2//1 3//2\n",
]


def test_parse_counts():
    mesh = parse_mesh(SAMPLE)
    assert len(mesh.vertices) == 3
    assert len(mesh.normals) == 2
    assert len(mesh.faces) == 1


def test_parse_values():
    mesh = parse_mesh(SAMPLE)
    assert mesh.vertices[1] == (1.5, 0.0, 0.0)
    assert mesh.normals[1] == (0.0, 1.0, 0.0)
    assert mesh.faces[0] == Face(vertices=(1, 2, 3), normals=(1, 1, 2))


def test_triangles_resolve_one_based_indices():
    mesh = parse_mesh(SAMPLE)
    (triangle,) = list(mesh.triangles())
    assert triangle[0] == ((0.0, 0.0, 1.0), (0.0, 0.0, 0.0))
    assert triangle[1] == ((0.0, 0.0, 1.0), (1.5, 0.0, 0.0))
    assert triangle[2] == ((0.0, 1.0, 0.0), (0.0, 2.5, 0.0))


def test_triangles_out_of_range_raises():
    mesh = Mesh(
        vertices=[(0.0, 0.0, 0.0)],
        normals=[(0.0, 1.0, 0.0)],
        faces=[Face(vertices=(1, 2, 1), normals=(1, 1, 1))],
    )
    with pytest.raises(IndexError):
        list(mesh.triangles())


def test_triangles_zero_index_raises():
    mesh = Mesh(
        vertices=[(0.0, 0.0, 0.0)],
        normals=[(0.0, 1.0, 0.0)],
        faces=[Face(vertices=(0, 1, 1), normals=(1, 1, 1))],
    )
    with pytest.raises(IndexError):
        list(mesh.triangles())


def test_empty_input_gives_empty_mesh():
    mesh = parse_mesh([])
    assert mesh == Mesh()
    assert list(mesh.triangles()) == []


def test_unknown_records_are_ignored():
    mesh = parse_mesh(["o name\n", "s off\n", "\n", "v 1 2 3\n"])
    assert mesh.vertices == [(1.0, 2.0, 3.0)]
    assert mesh.faces == []


def test_short_vertex_raises():
    with pytest.raises(ValueError):
        parse_mesh(["v 1.0 2.0\n"])


def test_malformed_face_raises():
    with pytest.raises(ValueError):
        parse_mesh(["f 1 2 3\n"])


def test_load_mesh_from_file(tmp_path):
    path = tmp_path / "model.txt"
    path.write_text("".join(SAMPLE), encoding="utf-8")
    assert load_mesh(path) == parse_mesh(SAMPLE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_mesh(tmp_path / "missing.txt")