import math
from collections import namedtuple

PROJECTION_SCALE = 200.0
# keeps the model in front of the projection plane
Z_SHIFT = 5.0

class Point3D(namedtuple("Point3D", ("x", "y", "z"))):
    """Immutable point in model space. Every transform returns a new point."""

    __slots__ = ()

    def rotate_x(self, angle):
        c, s = math.cos(angle), math.sin(angle)
        return Point3D(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def rotate_y(self, angle):
        c, s = math.cos(angle), math.sin(angle)
        return Point3D(self.x * c + self.z * s, self.y, -self.x * s + self.z * c)

    def rotate_z(self, angle):
        c, s = math.cos(angle), math.sin(angle)
        return Point3D(self.x * c - self.y * s, self.x * s + self.y * c, self.z)

    def rotate(self, ax, ay, az):
        # always X, then Y, then Z
        return self.rotate_x(ax).rotate_y(ay).rotate_z(az)

    def project(self, width, height):
        """Perspective-project onto a width x height surface centred on the origin.

        No clipping is done; z must stay above -Z_SHIFT for a finite result.
        """
        z = self.z + Z_SHIFT
        return (
            self.x * PROJECTION_SCALE / z + width / 2.0,
            self.y * PROJECTION_SCALE / z + height / 2.0,
        )

def get_unique_edges(faces):
    """Undirected edges of a face list, as (low, high) pairs in first-seen order."""
    seen = set()
    edges = []
    for face in faces:
        n = len(face)
        for i in range(n):
            a = face[i]
            b = face[(i + 1) % n]
            edge = (a, b) if a < b else (b, a)
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
    return edges

def check_faces(vertices, faces):
    count = len(vertices)
    for face_index, face in enumerate(faces):
        for index in face:
            if not 0 <= index < count:
                raise ValueError(
                    f"Face {face_index} references vertex {index}, "
                    f"but only {count} vertices are defined"
                )
