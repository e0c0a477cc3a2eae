"""Testes unitários de PointCollection e LineCollection.

Cobre:
    - busca do ponto mais próximo (raio de captura, desempate por ordem)
    - busca da primeira reta que contém o ponto
    - translação via handle
    - exportação para renderização (cores, tamanhos, idempotência)
"""

import unittest

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor

from line_editor.models import Line, LineCollection, Point, PointCollection


class TestPointCollection(unittest.TestCase):
    """Busca, inserção e exportação de PointCollection."""

    def setUp(self):
        self.points = PointCollection()

    def test_empty_collection_finds_nothing(self):
        self.assertIsNone(self.points.find_nearest_point(Point(0.0, 0.0)))

    def test_exact_match(self):
        self.points.add_point(Point(0.3, -0.4))
        self.assertEqual(self.points.find_nearest_point(Point(0.3, -0.4)), Point(0.3, -0.4))

    def test_returns_closest_of_several(self):
        for p in (Point(-0.5, 0.0), Point(0.1, 0.1), Point(0.6, 0.6)):
            self.points.add_point(p)
        self.assertEqual(self.points.find_nearest_point(Point(0.15, 0.05)), Point(0.1, 0.1))

    def test_nothing_beyond_capture_radius(self):
        self.points.add_point(Point(-0.9, -0.9))
        self.assertIsNone(self.points.find_nearest_point(Point(0.5, 0.5)))

    def test_point_exactly_at_capture_radius_is_not_captured(self):
        self.points.add_point(Point(0.0, 0.0))
        self.assertIsNone(self.points.find_nearest_point(Point(1.0, 0.0)))

    def test_point_at_origin_is_a_real_match(self):
        self.points.add_point(Point(0.0, 0.0))
        self.assertEqual(self.points.find_nearest_point(Point(0.01, 0.0)), Point(0.0, 0.0))

    def test_tie_goes_to_first_inserted(self):
        first = Point(-0.2, 0.0)
        second = Point(0.2, 0.0)
        self.points.add_point(first)
        self.points.add_point(second)
        self.assertIs(self.points.find_nearest_point(Point(0.0, 0.0)), first)

    def test_duplicates_are_kept(self):
        self.points.add_point(Point(0.1, 0.1))
        self.points.add_point(Point(0.1, 0.1))
        self.assertEqual(len(self.points), 2)

    def test_export_for_render(self):
        self.points.add_point(Point(0.1, 0.2))
        self.points.add_point(Point(-0.3, 0.4))
        batch = self.points.export_for_render()
        self.assertEqual(batch.points, [Point(0.1, 0.2), Point(-0.3, 0.4)])
        self.assertEqual(batch.color, QColor(Qt.red))
        self.assertEqual(batch.size, 10.0)

    def test_export_is_a_copy(self):
        self.points.add_point(Point(0.1, 0.2))
        batch = self.points.export_for_render()
        batch.points.append(Point(0.9, 0.9))
        self.assertEqual(len(self.points), 1)

    def test_exported_points_cannot_be_rewritten(self):
        self.points.add_point(Point(0.1, 0.1))
        batch = self.points.export_for_render()
        with self.assertRaises(AttributeError):
            batch.points[0].x = 0.9
        with self.assertRaises(AttributeError):
            batch.points[0].z = 0.9
        self.assertEqual(self.points[0], Point(0.1, 0.1))

    def test_export_twice_is_identical(self):
        self.points.add_point(Point(0.1, 0.2))
        self.points.add_point(Point(0.5, -0.5))
        self.assertEqual(self.points.export_for_render(), self.points.export_for_render())


class TestLineCollection(unittest.TestCase):
    """Busca por pertinência, handles e exportação de LineCollection."""

    def setUp(self):
        self.lines = LineCollection()

    def test_add_line_returns_handles_in_order(self):
        h1 = self.lines.add_line(Point(-1.0, 0.0), Point(1.0, 0.0))
        h2 = self.lines.add_line(Point(0.0, -1.0), Point(0.0, 1.0))
        self.assertEqual((h1, h2), (0, 1))
        self.assertEqual(self.lines[h2], Line(Point(0.0, -1.0), Point(0.0, 1.0)))

    def test_find_nearest_line_none_when_empty(self):
        self.assertIsNone(self.lines.find_nearest_line(Point(0.0, 0.0)))

    def test_find_nearest_line_none_when_nothing_contains(self):
        self.lines.add_line(Point(-1.0, 0.0), Point(1.0, 0.0))
        self.assertIsNone(self.lines.find_nearest_line(Point(0.0, 0.5)))

    def test_first_containing_line_wins(self):
        self.lines.add_line(Point(-1.0, 0.5), Point(1.0, 0.5))  # não contém a origem
        first = self.lines.add_line(Point(-1.0, -1.0), Point(1.0, 1.0))
        self.lines.add_line(Point(-1.0, 1.0), Point(1.0, -1.0))
        self.lines.add_line(Point(-1.0, 0.0), Point(1.0, 0.0))
        self.assertEqual(self.lines.find_nearest_line(Point(0.0, 0.0)), first)

    def test_first_wins_even_if_later_line_is_closer(self):
        far = self.lines.add_line(Point(-1.0, 0.008), Point(1.0, 0.008))
        self.lines.add_line(Point(-1.0, 0.0), Point(1.0, 0.0))
        self.assertEqual(self.lines.find_nearest_line(Point(0.0, 0.0)), far)

    def test_translate_line_through_handle(self):
        handle = self.lines.add_line(Point(-1.0, 0.0), Point(1.0, 0.0))
        self.lines.add_line(Point(0.0, -1.0), Point(0.0, 1.0))  # handle continua válido
        self.lines.translate_line(handle, Point(0.0, 0.5))
        self.assertTrue(self.lines[handle].contains(Point(0.7, 0.5)))

    def test_export_for_render_clips_lines(self):
        self.lines.add_line(Point(-0.1, 0.0), Point(0.1, 0.0))
        items = self.lines.export_for_render()
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].start, Point(-1.0, 0.0))
        self.assertEqual(items[0].end, Point(1.0, 0.0))
        self.assertEqual(items[0].color, QColor(Qt.cyan))
        self.assertEqual(items[0].width, 3.0)

    def test_export_for_render_skips_offscreen_lines(self):
        self.lines.add_line(Point(-1.0, 5.0), Point(1.0, 5.0))
        self.lines.add_line(Point(0.0, -0.5), Point(0.0, 0.5))
        items = self.lines.export_for_render()
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].start, Point(0.0, -1.0))

    def test_export_twice_is_identical(self):
        self.lines.add_line(Point(-0.5, -0.2), Point(0.4, 0.3))
        self.lines.add_line(Point(0.2, 0.9), Point(-0.1, -0.7))
        self.assertEqual(self.lines.export_for_render(), self.lines.export_for_render())


if __name__ == "__main__":
    unittest.main()
