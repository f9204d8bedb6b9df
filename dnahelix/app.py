"""Interactive window showing the animated DNA helix."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass

import pygame

from dnahelix.animator import Animation, Animator, StatusBit
from dnahelix.circle import BLACK, BLUE, GREEN, RED, WHITE, YELLOW, Bond, Circle, Color

WIN_SIZE_X = 1100.0
WIN_SIZE_Y = 800.0
FRAME_RATE = 120
DEFAULT_FONT = "./ARIAL.TTF"
RESTART_X = 400.0
HELP_LINE_HEIGHT = 23.0

_FORMULA_LINES = (
    (440.0, "Taste 0: (Default) sin= A * sin(f * t_1 + phase_offset) UND cos= A * cos(f * t_2 + phase_offset)"),
    (480.0, "Taste 1: sin= A * sin(f * 2t_1 + phase_offset) UND cos= A * cos(f * (2t_1 + t_2) + phase_offset)"),
    (500.0, "Taste 2: sin= A * sin(f * 2t_1 + phase_offset) UND cos= A * cos(f * (2t_2) + phase_offset)"),
)
_HELP_TOP = 520.0
_HELP_TEXT = (
    "W = White/Black Hintergrundfarbe\n"
    "A = Animation starten\n"
    "T = Zeige Aminosäure an\n"
    "S = Sinus ein-/ ausblenden\n"
    "C = Cosinus ein-/ausblenden\n"
    "B = Bindungen ein-/ ausblenden\n"
    "I = Statistik\n"
    "R = Reset\n"
    "Leertaste = Pause // Weiter\n"
    "O = Overlay ein-/ ausblenden\n"
    "Escape = Programm schließen"
)

_STATUS_TOGGLES = {
    "space": StatusBit.IS_PAUSED,
    "o": StatusBit.SHOW_OVERLAY,
    "w": StatusBit.SHOW_WHITE_SCREEN,
    "t": StatusBit.SHOW_ACID_TYPE,
    "i": StatusBit.SHOW_STATISTICS,
}

_ANIMATION_TOGGLES = {
    "p": Animation.FLY_PLANE,
    "1": Animation.SIN2T1_COS_T2_PLUS_2T1,
    "2": Animation.COS_2T2,
    "c": Animation.SHOW_COSINUS,
    "s": Animation.SHOW_SINUS,
    "b": Animation.SHOW_BINDUNGEN,
}


@dataclass(frozen=True)
class Label:
    """A piece of text placed in the window."""

    text: str
    x: float
    y: float
    color: Color


def _toggle(flags: set, flag) -> None:
    if flag in flags:
        flags.discard(flag)
    else:
        flags.add(flag)


def start_animation(animator: Animator, special: bool) -> None:
    """Seed the strands and switch on the standard or self-restarting animation."""
    status = animator.status_bits
    if special:
        status.add(StatusBit.SPECIAL_ANIMATION)
        status.discard(StatusBit.STANDARD_ANIMATION)
    status.add(StatusBit.IS_RUNNING)
    animator.start_by_create_new_ball(animator.dna.spiral_one)
    animator.start_by_create_new_ball(animator.dna.spiral_second)
    animator.start_by_create_new_ball(animator.rect_builder)
    animator.set_system_clock_now()
    animator.w_animation.update(
        {Animation.SHOW_COSINUS, Animation.SHOW_SINUS, Animation.SHOW_BINDUNGEN, Animation.DNA}
    )
    if not special:
        status.add(StatusBit.STANDARD_ANIMATION)


def handle_key(animator: Animator, key: str) -> bool:
    """Apply a key press by its name; return False when the program should close."""
    key = key.lower()
    status = animator.status_bits
    if key == "escape":
        return False
    if key == "r":
        animator.initialize_start()
        animator.initialize_time_points()
    elif key == "u":
        if StatusBit.IS_RUNNING not in status:
            start_animation(animator, special=True)
    elif key == "a":
        if StatusBit.IS_RUNNING not in status and StatusBit.IS_PAUSED not in status:
            start_animation(animator, special=False)
    elif key == "0":
        animator.w_animation.discard(Animation.SIN2T1_COS_T2_PLUS_2T1)
        animator.w_animation.discard(Animation.COS_2T2)
    elif key in _STATUS_TOGGLES:
        _toggle(status, _STATUS_TOGGLES[key])
    elif key in _ANIMATION_TOGGLES:
        _toggle(animator.w_animation, _ANIMATION_TOGGLES[key])
    return True


def step(animator: Animator, win_size_x: float, win_size_y: float) -> None:
    """Advance the animation by one frame."""
    status = animator.status_bits
    if StatusBit.IS_RUNNING not in status or StatusBit.IS_PAUSED in status:
        return
    if Animation.FLY_PLANE in animator.w_animation:
        animator.fly_plane(win_size_x)
    if Animation.DNA not in animator.w_animation:
        return
    if StatusBit.SPECIAL_ANIMATION in status:
        animator.process_special_dna_flow(win_size_x, win_size_y)
        spiral = animator.dna.spiral_one
        if spiral and spiral[-1].x >= RESTART_X:
            animator.w_animation.add(Animation.RESTART)
    if StatusBit.STANDARD_ANIMATION in status:
        animator.process_dna_flow(win_size_x, win_size_y)


def overlay_lines() -> list[tuple[float, str]]:
    """Help overlay as (y position, text) pairs, from top to bottom."""
    lines = list(_FORMULA_LINES)
    for i, text in enumerate(_HELP_TEXT.split("\n")):
        lines.append((_HELP_TOP + i * HELP_LINE_HEIGHT, text))
    return lines


def _foreground(animator: Animator) -> Color:
    return BLACK if StatusBit.SHOW_WHITE_SCREEN in animator.status_bits else WHITE


def statistics_lines(animator: Animator) -> list[Label]:
    """Statistics labels, or nothing when statistics are hidden or nothing runs."""
    status = animator.status_bits
    if StatusBit.SHOW_STATISTICS not in status or StatusBit.IS_RUNNING not in status:
        return []
    fg = _foreground(animator)
    one, second = animator.dna.spiral_one, animator.dna.spiral_second
    labels = [Label(f"Cooldown: {animator.cooldown_ms()}", 250.0, 0.0, fg)]
    if len(one) > 1 and len(second) > 1:
        labels.append(Label(f"Sinus: {len(one) - 1}", 550.0, 0.0, fg))
        labels.append(Label(f"Cosinus: {len(second) - 1}", 800.0, 0.0, fg))
    stats = animator.stats
    top, offset = 350.0, 20.0
    for i, (name, count, color) in enumerate(
        (
            ("Adenin", stats.adenin, BLUE),
            ("Thymin", stats.thymin, RED),
            ("Guanin", stats.guanin, GREEN),
            ("Cytosin", stats.cytosin, YELLOW),
        )
    ):
        labels.append(Label(f"{name}: {count}", 0.0, top + i * offset, color))
    return labels


def _status_label(animator: Animator) -> Label | None:
    fg = _foreground(animator)
    if StatusBit.IS_PAUSED in animator.status_bits:
        return Label("Paused", 10.0, 0.0, fg)
    if StatusBit.IS_RUNNING in animator.status_bits:
        return Label("Running", 10.0, 0.0, fg)
    return None


# ---------------------------------------------------------------- rendering


def _draw_text(screen, font, text: str, x: float, y: float, color: Color) -> None:
    if not text:
        return
    surface = font.render(text, True, color.rgb)
    surface.set_alpha(color.a)
    screen.blit(surface, (x, y))


def _draw_label(screen, font, label: Label) -> None:
    _draw_text(screen, font, label.text, label.x, label.y, label.color)


def _draw_circle(screen, circle: Circle) -> None:
    r = circle.radius * circle.scale
    outline = circle.outline_thickness * circle.scale
    outer = r + outline
    size = int(math.ceil(2 * outer)) + 2
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    centre = (size / 2.0, size / 2.0)
    pygame.draw.circle(surface, circle.outline_color.rgba, centre, outer)
    pygame.draw.circle(surface, circle.fill_color.rgba, centre, r)
    screen.blit(surface, (circle.x + r - size / 2.0, circle.y + r - size / 2.0))


def _draw_bond(screen, bond: Bond) -> None:
    if bond.length <= 0.0:
        return
    angle = math.radians(bond.rotation)
    ux, uy = math.cos(angle), math.sin(angle)
    nx, ny = -uy * bond.thickness / 2.0, ux * bond.thickness / 2.0
    ex, ey = bond.x + ux * bond.length, bond.y + uy * bond.length
    points = [
        (bond.x - nx, bond.y - ny),
        (ex - nx, ey - ny),
        (ex + nx, ey + ny),
        (bond.x + nx, bond.y + ny),
    ]
    left = min(p[0] for p in points)
    top = min(p[1] for p in points)
    width = int(math.ceil(max(p[0] for p in points) - left)) + 2
    height = int(math.ceil(max(p[1] for p in points) - top)) + 2
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.polygon(surface, bond.color.rgba, [(px - left, py - top) for px, py in points])
    screen.blit(surface, (left, top))


def _draw_plane(screen, animator: Animator) -> None:
    plane = animator.plane
    surface = pygame.Surface((140, 100), pygame.SRCALPHA)
    for wing in plane.wings():
        pygame.draw.polygon(surface, plane.wing_color.rgba, wing)
    left, top, width, height = plane.body
    pygame.draw.rect(surface, plane.body_color.rgba, pygame.Rect(left, top, width, height))
    screen.blit(surface, (plane.x, plane.y))


def _draw_strands(screen, animator: Animator) -> None:
    anim = animator.w_animation
    one, second = animator.dna.spiral_one, animator.dna.spiral_second
    show_sin = Animation.SHOW_SINUS in anim
    show_cos = Animation.SHOW_COSINUS in anim
    show_bonds = Animation.SHOW_BINDUNGEN in anim

    if show_sin and show_cos:
        for i, sin_circle in enumerate(one[1:], start=1):
            cos_circle = second[i] if i < len(second) else None
            if show_bonds:
                _draw_bond(screen, sin_circle.bond)
                almost_equal = cos_circle is not None and abs(sin_circle.y - cos_circle.y) < 0.1
                from_animator = (animator_area_span() / 1.5)
                sin_first = sin_circle.y < from_animator and almost_equal
            else:
                sin_first = (
                    cos_circle is not None
                    and sin_circle.y > cos_circle.y
                    and sin_circle.y < 150.0
                )
            if sin_first:
                _draw_circle(screen, sin_circle)
                if cos_circle is not None:
                    _draw_circle(screen, cos_circle)
            else:
                if cos_circle is not None:
                    _draw_circle(screen, cos_circle)
                _draw_circle(screen, sin_circle)
    elif show_sin:
        for sin_circle in one[1:]:
            if show_bonds:
                _draw_bond(screen, sin_circle.bond)
            _draw_circle(screen, sin_circle)
    elif show_cos:
        for i, cos_circle in enumerate(second[1:], start=1):
            if show_bonds and i < len(one):
                _draw_bond(screen, one[i].bond)
            _draw_circle(screen, cos_circle)


def animator_area_span() -> float:
    """Height of the vertical area the strands move in."""
    from dnahelix.animator import AREA_MAX_Y, AREA_MIN_Y

    return AREA_MAX_Y - AREA_MIN_Y


def _draw_acid_labels(screen, font, animator: Animator) -> None:
    anim = animator.w_animation
    one, second = animator.dna.spiral_one, animator.dna.spiral_second
    for i, sin_circle in enumerate(one[1:], start=1):
        if i < len(second) and Animation.SHOW_COSINUS in anim:
            c = second[i]
            _draw_text(screen, font, c.text, c.text_x, c.text_y, c.text_color)
        if Animation.SHOW_SINUS in anim:
            _draw_text(screen, font, sin_circle.text, sin_circle.text_x, sin_circle.text_y, sin_circle.text_color)


def _draw_frame(screen, font, clock_font, animator: Animator, clock_text: str) -> None:
    status = animator.status_bits
    white = StatusBit.SHOW_WHITE_SCREEN in status
    screen.fill(WHITE.rgb if white else BLACK.rgb)
    fg = _foreground(animator)

    if StatusBit.IS_RUNNING in status:
        for circle in animator.rect_builder:
            _draw_circle(screen, circle)
        for rect in animator.rect_connections:
            _draw_bond(screen, rect)
        if Animation.FLY_PLANE in animator.w_animation:
            _draw_plane(screen, animator)
        _draw_strands(screen, animator)
        if StatusBit.SHOW_ACID_TYPE in status:
            _draw_acid_labels(screen, font, animator)
        if StatusBit.SHOW_OVERLAY in status:
            _draw_text(screen, clock_font, clock_text, 150.0, 0.0, WHITE)

    for label in statistics_lines(animator):
        _draw_label(screen, font, label)

    status_label = _status_label(animator)
    if status_label is not None:
        _draw_label(screen, font, status_label)

    if StatusBit.SHOW_OVERLAY in status:
        for y, text in overlay_lines():
            _draw_text(screen, font, text, 0.0, y, fg)


def _load_font(path: str, size: int):
    try:
        return pygame.font.Font(path, size)
    except (FileNotFoundError, OSError) as exc:
        print(f"cannot load font {path}: {exc}", file=sys.stderr)
        return pygame.font.Font(None, size)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the animation until it is closed."""
    parser = argparse.ArgumentParser(description="Animated DNA helix.")
    parser.add_argument("--font", default=DEFAULT_FONT, help="TrueType font file to use")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        font = _load_font(args.font, 20)
        clock_font = _load_font(args.font, 30)
        screen = pygame.display.set_mode((int(WIN_SIZE_X), int(WIN_SIZE_Y)))
        pygame.display.set_caption("DNA Sequenz")
        frame_clock = pygame.time.Clock()

        animator = Animator()
        animator.initialize_start()
        animator.initialize_time_points()

        clock_text = ""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not handle_key(animator, pygame.key.name(event.key)):
                        running = False
            if StatusBit.IS_RUNNING in animator.status_bits:
                clock_text = animator.elapsed_text()
            step(animator, WIN_SIZE_X, WIN_SIZE_Y)
            _draw_frame(screen, font, clock_font, animator, clock_text)
            pygame.display.flip()
            frame_clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())