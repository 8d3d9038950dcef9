import logging
import random
import time
from pathlib import Path

import pygame

from .config import (
    BANNER_COLOR,
    BANNER_FONT_SIZE,
    BANNER_TEXT_COLOR,
    BOARD_COLOR,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    HEIGHT,
    MENU_BORDER,
    MENU_BORDER_COLOR,
    MENU_COLOR,
    MENU_HEIGHT,
    MOUSE_HEIGHT,
    MOUSE_SPRITE_PATH,
    MOUSE_WIDTH,
    SCORE_COLOR,
    TITLE,
    WIDTH,
)
from .errors import SpriteLoadError
from .model import Board, SessionState, Target
from .motion import MotionController
from .session import SessionTimer

log = logging.getLogger(__name__)

SESSION_ENDED = pygame.USEREVENT + 1


def load_sprite(path: Path, size: tuple[float, float]) -> pygame.Surface:
    try:
        image = pygame.image.load(str(path))
    except (OSError, pygame.error) as exc:
        raise SpriteLoadError(f"cannot load sprite {path}: {exc}") from exc
    return pygame.transform.smoothscale(image.convert_alpha(), (int(size[0]), int(size[1])))


class CatchTheMouseApp:
    def __init__(self, rng: random.Random | None = None, sprite_path: Path = MOUSE_SPRITE_PATH):
        pygame.init()
        pygame.display.set_caption(TITLE)

        self.width, self.height = WIDTH, HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.banner_font = pygame.font.SysFont(FONT_NAME, BANNER_FONT_SIZE, bold=True)
        self.sprite = load_sprite(sprite_path, (MOUSE_WIDTH, MOUSE_HEIGHT))

        self.menu_rect = pygame.Rect(0, 0, self.width, MENU_HEIGHT)
        self.board_rect = pygame.Rect(0, MENU_HEIGHT, self.width, self.height - MENU_HEIGHT)

        self.board = Board(float(self.board_rect.w), float(self.board_rect.h))
        self.target = Target(width=MOUSE_WIDTH, height=MOUSE_HEIGHT)
        self.session = SessionState()
        self.motion = MotionController(self.board, self.target, self.session, rng=rng)
        self.timer = SessionTimer(self.session, on_expire=self._post_session_end)

        self.running = True
        self.final_score: int | None = None

    def start(self):
        self.session.started_at = time.monotonic()
        self.motion.start()
        self.timer.start()

    def _post_session_end(self, score: int, elapsed: float):
        # Runs on the timer thread; hand the result to the frame loop.
        try:
            pygame.event.post(pygame.event.Event(SESSION_ENDED, score=score, elapsed=elapsed))
        except pygame.error:
            log.debug("window already closed, dropping session end event")

    def _on_session_end(self, event):
        self.motion.freeze()
        self.final_score = event.score

    def _rotated_sprite(self):
        return pygame.transform.rotate(self.sprite, -self.target.heading)

    def _target_rect(self, surf: pygame.Surface | None = None) -> pygame.Rect:
        if surf is None:
            surf = self._rotated_sprite()
        center = (
            round(self.board_rect.x + self.target.x),
            round(self.board_rect.y + self.target.y),
        )
        return surf.get_rect(center=center)

    def _handle_mouse_click(self, pos):
        if self.session.ended:
            return
        x = pos[0] - self.board_rect.x
        y = pos[1] - self.board_rect.y
        if self.target.contains(x, y):
            self.motion.on_target_clicked()

    def _handle_keydown(self, event):
        if event.key in (pygame.K_ESCAPE, pygame.K_F10):
            self.running = False

    def _handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_mouse_click(event.pos)
        elif event.type == SESSION_ENDED:
            self._on_session_end(event)

    def _draw_menu(self):
        pygame.draw.rect(self.screen, MENU_COLOR, self.menu_rect)
        pygame.draw.line(
            self.screen,
            MENU_BORDER_COLOR,
            (0, self.menu_rect.bottom - MENU_BORDER),
            (self.width, self.menu_rect.bottom - MENU_BORDER),
            MENU_BORDER,
        )
        surf = self.font.render(str(self.session.score), True, SCORE_COLOR)
        self.screen.blit(surf, surf.get_rect(center=self.menu_rect.center))

    def _draw_board(self):
        pygame.draw.rect(self.screen, BOARD_COLOR, self.board_rect)
        surf = self._rotated_sprite()
        self.screen.blit(surf, self._target_rect(surf))

    def _draw_banner(self):
        if self.final_score is None:
            return

        overlay = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
        overlay.fill(BANNER_COLOR)
        self.screen.blit(overlay, self.board_rect.topleft)

        lines = ["Time's up!", f"You caught the mouse {self.final_score} times"]
        y = self.board_rect.centery - len(lines) * BANNER_FONT_SIZE // 2
        for line in lines:
            surf = self.banner_font.render(line, True, BANNER_TEXT_COLOR)
            self.screen.blit(surf, (self.width // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 8

    def _draw(self):
        self._draw_menu()
        self._draw_board()
        self._draw_banner()

    def run(self):
        self.start()

        while self.running:
            dt = self.clock.tick(FPS)

            for event in pygame.event.get():
                self._handle_event(event)

            self.motion.update(dt)
            self._draw()
            pygame.display.flip()

        self.timer.stop()
        pygame.quit()
