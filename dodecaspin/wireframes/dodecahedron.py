# Dodecahedron wireframe data
# Regular polyhedron with 12 pentagonal faces, 20 vertices and 30 edges

import math

from dodecaspin.animations.wireframe_3d import Point3D, get_unique_edges, check_faces

# Golden ratio for dodecahedron construction
PHI = (1 + math.sqrt(5)) / 2

VERTICES = (
    # cube corners
    Point3D(1.0, 1.0, 1.0),
    Point3D(1.0, 1.0, -1.0),
    Point3D(1.0, -1.0, 1.0),
    Point3D(1.0, -1.0, -1.0),
    Point3D(-1.0, 1.0, 1.0),
    Point3D(-1.0, 1.0, -1.0),
    Point3D(-1.0, -1.0, 1.0),
    Point3D(-1.0, -1.0, -1.0),

    # golden rectangle in the yz plane
    Point3D(0.0, 1.0 / PHI, PHI),
    Point3D(0.0, 1.0 / PHI, -PHI),
    Point3D(0.0, -1.0 / PHI, PHI),
    Point3D(0.0, -1.0 / PHI, -PHI),

    # golden rectangle in the xy plane
    Point3D(1.0 / PHI, PHI, 0.0),
    Point3D(1.0 / PHI, -PHI, 0.0),
    Point3D(-1.0 / PHI, PHI, 0.0),
    Point3D(-1.0 / PHI, -PHI, 0.0),

    # golden rectangle in the xz plane
    Point3D(PHI, 0.0, 1.0 / PHI),
    Point3D(PHI, 0.0, -1.0 / PHI),
    Point3D(-PHI, 0.0, 1.0 / PHI),
    Point3D(-PHI, 0.0, -1.0 / PHI),
)

FACES = (
    # pentagons, counter-clockwise seen from outside
    (0, 8, 10, 2, 16),
    (0, 16, 17, 1, 12),
    (0, 12, 14, 4, 8),
    (1, 9, 5, 14, 12),
    (2, 13, 3, 17, 16),
    (1, 17, 3, 11, 9),
    (2, 10, 6, 15, 13),
    (3, 13, 15, 7, 11),
    (4, 18, 6, 10, 8),
    (5, 9, 11, 7, 19),
    (4, 14, 5, 19, 18),
    (6, 18, 19, 7, 15),
)

check_faces(VERTICES, FACES)

EDGES = tuple(get_unique_edges(FACES))
