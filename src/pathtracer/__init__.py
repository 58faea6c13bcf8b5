"""Offline Monte Carlo path tracer.

Subpackages:
    core: vectors, rays, bounding boxes, sampling helpers and transforms
    geometry: hittable primitives, containers, BVH and OBJ meshes
    materials: scattering materials and textures
    camera: thin-lens camera and animation paths
    renderer: radiance estimator, parallel renderer and image output
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
