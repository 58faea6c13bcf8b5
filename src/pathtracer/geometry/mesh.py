# geometry/mesh.py
import logging
import os
from typing import Dict, List, Optional, Sequence, Tuple
from pathtracer.core.vector import Vector3, Color
from pathtracer.core.uv import UV
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.transform import Matrix4
from pathtracer.geometry.bvh import build_bvh
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.triangle import Triangle
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal

logger = logging.getLogger(__name__)

DEFAULT_MESH_COLOR = Color(0.2, 0.7, 0.2)


class TriangleMesh(Hittable):
    """A 3D mesh composed of triangles, intersected through its own BVH."""
    def __init__(self, triangles: Sequence[Triangle]):
        self.triangles = list(triangles)
        self.bvh = build_bvh(self.triangles)
        self.box = self.bvh.bounding_box()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.bvh.hit(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return self.box

    def __len__(self) -> int:
        return len(self.triangles)


def load_mtl(filename: str) -> Dict[str, Material]:
    """
    Reads a Wavefront material library. Illumination model 7 becomes a
    dielectric (index Ni), model 5 a metal (color Kd, fuzz 1/Ns) and
    everything else a lambertian with color Kd.
    """
    params: Dict[str, dict] = {}
    current = None
    with open(filename, 'r') as f:
        for line in f:
            values = line.split()
            if not values or values[0].startswith('#'):
                continue
            if values[0] == 'newmtl':
                current = params.setdefault(' '.join(values[1:]), {})
            elif current is None:
                continue
            elif values[0] == 'Kd':
                current['Kd'] = Color(float(values[1]), float(values[2]), float(values[3]))
            elif values[0] in ('Ns', 'Ni', 'illum'):
                current[values[0]] = float(values[1])

    materials: Dict[str, Material] = {}
    for name, p in params.items():
        diffuse = p.get('Kd', DEFAULT_MESH_COLOR)
        illum = int(p.get('illum', 2))
        if illum == 7:
            materials[name] = Dielectric(p.get('Ni', 1.5))
        elif illum == 5:
            shininess = p.get('Ns', 0.0)
            materials[name] = Metal(diffuse, 1.0 / shininess if shininess > 0 else 0.0)
        else:
            materials[name] = Lambertian(diffuse)
    return materials


def _resolve(index: str, count: int) -> int:
    i = int(index)
    # OBJ indices are 1-based; negative ones count back from the newest entry
    return i - 1 if i > 0 else count + i


def load_obj(filename: str, material: Optional[Material] = None,
             transform: Optional[Matrix4] = None) -> TriangleMesh:
    """
    Load a 3D model from an OBJ file with UV and normal support.

    Faces with more than three vertices are fan-triangulated. Faces use the
    material named by the active `usemtl` if the file's `mtllib` defines it,
    otherwise `material`, otherwise a default green lambertian.
    """
    vertices: List[Vector3] = []
    normals: List[Vector3] = []
    uvs: List[UV] = []
    triangles: List[Triangle] = []
    library: Dict[str, Material] = {}
    fallback = material if material is not None else Lambertian(DEFAULT_MESH_COLOR)
    active = fallback
    skipped = 0
    base_dir = os.path.dirname(filename)

    logger.info("Opening OBJ file: %s", filename)
    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split()
            if not values or values[0].startswith('#'):
                continue
            try:
                if values[0] == 'v':
                    v = Vector3(float(values[1]), float(values[2]), float(values[3]))
                    vertices.append(transform.transform_point(v) if transform else v)
                elif values[0] == 'vn':
                    n = Vector3(float(values[1]), float(values[2]), float(values[3]))
                    normals.append(transform.transform_normal(n) if transform else n.normalize())
                elif values[0] == 'vt':
                    uvs.append(UV(float(values[1]), float(values[2])))
                elif values[0] == 'mtllib':
                    library.update(load_mtl(os.path.join(base_dir, ' '.join(values[1:]))))
                elif values[0] == 'usemtl':
                    active = library.get(' '.join(values[1:]), fallback)
                elif values[0] == 'f':
                    corners = [_parse_corner(c, len(vertices), len(uvs), len(normals))
                               for c in values[1:]]
                    for i in range(1, len(corners) - 1):
                        triangle = _make_triangle((corners[0], corners[i], corners[i + 1]),
                                                  vertices, uvs, normals, active)
                        if triangle is None:
                            skipped += 1
                        else:
                            triangles.append(triangle)
            except (IndexError, ValueError) as e:
                raise ValueError(f"{filename}:{line_num}: cannot parse {line.strip()!r}: {e}") from e

    logger.info("Loaded %d vertices, %d normals, %d UVs, %d triangles (%d degenerate skipped)",
                len(vertices), len(normals), len(uvs), len(triangles), skipped)
    return TriangleMesh(triangles)


def _parse_corner(corner: str, n_vertices: int, n_uvs: int,
                  n_normals: int) -> Tuple[int, Optional[int], Optional[int]]:
    indices = corner.split('/')
    v_idx = _resolve(indices[0], n_vertices)
    t_idx = _resolve(indices[1], n_uvs) if len(indices) > 1 and indices[1] else None
    n_idx = _resolve(indices[2], n_normals) if len(indices) > 2 and indices[2] else None
    return v_idx, t_idx, n_idx


def _make_triangle(corners, vertices, uvs, normals, material) -> Optional[Triangle]:
    v0, v1, v2 = (vertices[c[0]] for c in corners)
    if (v1 - v0).cross(v2 - v0).near_zero():
        return None
    tri_uvs = None
    if all(c[1] is not None for c in corners):
        tri_uvs = [uvs[c[1]] for c in corners]
    tri_normals = None
    if all(c[2] is not None for c in corners):
        tri_normals = [normals[c[2]] for c in corners]
    return Triangle(v0, v1, v2, material, normals=tri_normals, uvs=tri_uvs)
