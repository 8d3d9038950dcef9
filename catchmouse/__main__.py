import logging
import sys

import pygame

from .app import CatchTheMouseApp
from .errors import SpriteLoadError

log = logging.getLogger("catchmouse")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = CatchTheMouseApp()
    except SpriteLoadError as exc:
        log.error("%s", exc)
        pygame.quit()
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
