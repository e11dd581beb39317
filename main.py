"""
main.py — Bootstrap

1. Load host settings (data/tuning.toml)
2. Load the room and event catalogs
3. Create the event bus and the game session
4. Create the app and push the house scene
5. Run
"""

from core import tuning
from core.app import App
from core.data import Catalog
from core.events import EventBus
from logic.session import GameSession
from scenes.house_scene import HouseScene


def main():
    tuning.load()

    catalog = Catalog.from_files()
    bus = EventBus()
    session = GameSession(catalog, bus=bus)

    app = App(
        title=tuning.get("app", "title", "Dream Story"),
        width=int(tuning.get("app", "width", 960)),
        height=int(tuning.get("app", "height", 640)),
        fps=int(tuning.get("app", "fps", 60)),
    )
    speeds = [int(x) for x in tuning.get("session", "speed_steps", [1])]
    app.push_scene(HouseScene(session, bus, speed_steps=speeds))
    app.run()


if __name__ == "__main__":
    main()
