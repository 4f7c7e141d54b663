import pygame

from .settings import (
    PROGRESS_BG, PROGRESS_FILL, TEXT_COLOR, TEXT_ACCENT, TEXT_SHADOW,
    TEXT_SIZE, TEXT_X, TEXT_Y, LINE_HEIGHT, SHADOW_OFFSET,
)

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================


def build_font(size=TEXT_SIZE):
    for name in ("Consolas", "Courier New", "Lucida Console", "DejaVu Sans Mono"):
        try:
            font = pygame.font.SysFont(name, size)
        except (pygame.error, OSError):
            continue
        if font is not None:
            return font
    return pygame.font.Font(None, size)


def draw_text_block(screen, font, lines, x=TEXT_X, y=TEXT_Y):
    """Shadowed text. Lines with a colon use the accent colour."""
    for line in lines:
        if not line:
            y += LINE_HEIGHT // 2
            continue
        color = TEXT_ACCENT if ":" in line else TEXT_COLOR
        screen.blit(font.render(line, True, TEXT_SHADOW), (x + SHADOW_OFFSET, y + SHADOW_OFFSET))
        screen.blit(font.render(line, True, color), (x, y))
        y += LINE_HEIGHT


def draw_frame(screen, frame, font):
    screen.fill(frame.background)
    pygame.draw.rect(screen, PROGRESS_BG, pygame.Rect(*frame.progress_bg))
    fx, fy, fw, fh = frame.progress_fill
    if fw > 0:
        pygame.draw.rect(screen, PROGRESS_FILL, pygame.Rect(fx, fy, fw, fh))
    for x, y, w, h, c in frame.bars:
        pygame.draw.rect(screen, c, pygame.Rect(x, y, max(1, w), h))
    draw_text_block(screen, font, frame.lines)
    pygame.display.flip()
