"""
Tests for drawing onto a plain Surface. No window is opened; the SDL
dummy video driver is selected and the display flip is patched out.
"""

import os
import unittest
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from stepsorter.presentation import Frame
from stepsorter.render import build_font, draw_text_block, draw_frame
from stepsorter.settings import (
    TEXT_COLOR, TEXT_ACCENT, TEXT_SHADOW, TEXT_X, TEXT_Y, LINE_HEIGHT, SHADOW_OFFSET,
    PROGRESS_BG, PROGRESS_FILL,
)


class FakeFont:
    """Returns (text, color) instead of a surface so blits can be inspected."""

    def render(self, text, antialias, color):
        return (text, color)


def colors_on(surface):
    w, h = surface.get_size()
    return {tuple(surface.get_at((x, y)))[:3] for x in range(w) for y in range(h)}


class TestTextBlock(unittest.TestCase):

    def test_shadow_then_text_with_offset(self):
        screen = mock.MagicMock()
        draw_text_block(screen, FakeFont(), ["plain"])
        calls = [c.args for c in screen.blit.call_args_list]
        self.assertEqual(calls, [
            (("plain", TEXT_SHADOW), (TEXT_X + SHADOW_OFFSET, TEXT_Y + SHADOW_OFFSET)),
            (("plain", TEXT_COLOR),  (TEXT_X, TEXT_Y)),
        ])

    def test_colon_lines_use_accent(self):
        screen = mock.MagicMock()
        draw_text_block(screen, FakeFont(), ["Swaps: 3", "no colon here"])
        fronts = [c.args[0] for c in screen.blit.call_args_list][1::2]
        self.assertEqual(fronts, [("Swaps: 3", TEXT_ACCENT), ("no colon here", TEXT_COLOR)])

    def test_empty_line_advances_half_a_line(self):
        screen = mock.MagicMock()
        draw_text_block(screen, FakeFont(), ["A:B", "", "plain"])
        self.assertEqual(screen.blit.call_count, 4)
        ys = [c.args[1][1] for c in screen.blit.call_args_list][1::2]
        self.assertEqual(ys, [TEXT_Y, TEXT_Y + LINE_HEIGHT + LINE_HEIGHT // 2])

    def test_pixels_on_a_real_surface(self):
        """Accent and plain lines leave their own colours behind."""
        pygame.font.init()
        font = pygame.font.Font(None, 48)
        surf = pygame.Surface((300, 60))
        surf.fill((1, 2, 3))
        draw_text_block(surf, font, ["A:B"], x=5, y=5)
        seen = colors_on(surf)
        self.assertIn(TEXT_ACCENT, seen)
        self.assertIn(TEXT_SHADOW, seen)
        self.assertNotIn(TEXT_COLOR, seen)

        surf.fill((1, 2, 3))
        draw_text_block(surf, font, ["HI"], x=5, y=5)
        seen = colors_on(surf)
        self.assertIn(TEXT_COLOR, seen)
        self.assertNotIn(TEXT_ACCENT, seen)


class TestDrawFrame(unittest.TestCase):

    def setUp(self):
        pygame.font.init()

    def test_background_progress_and_bars(self):
        surf  = pygame.Surface((200, 100))
        frame = Frame(
            background=(10, 12, 20),
            bars=[(150, 20, 10, 50, (1, 2, 3)), (170, 20, 0, 50, (4, 5, 6))],
            progress_bg=(0, 90, 200, 10),
            progress_fill=(0, 90, 50, 10),
            lines=[],
        )
        with mock.patch("pygame.display.flip") as flip:
            draw_frame(surf, frame, build_font())
        flip.assert_called_once_with()
        self.assertEqual(tuple(surf.get_at((199, 0)))[:3], (10, 12, 20))
        self.assertEqual(tuple(surf.get_at((10, 95)))[:3], PROGRESS_FILL)
        self.assertEqual(tuple(surf.get_at((150, 95)))[:3], PROGRESS_BG)
        self.assertEqual(tuple(surf.get_at((155, 40)))[:3], (1, 2, 3))
        # zero-width bars are still drawn one pixel wide
        self.assertEqual(tuple(surf.get_at((170, 40)))[:3], (4, 5, 6))

    def test_empty_fill_is_not_drawn(self):
        surf  = pygame.Surface((40, 20))
        frame = Frame(background=(0, 0, 0), progress_bg=(0, 10, 40, 10),
                      progress_fill=(0, 10, 0, 10))
        with mock.patch("pygame.display.flip"):
            draw_frame(surf, frame, build_font())
        self.assertEqual(tuple(surf.get_at((0, 15)))[:3], PROGRESS_BG)


if __name__ == "__main__":
    unittest.main()
