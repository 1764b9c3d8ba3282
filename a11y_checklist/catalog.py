"""Fixed catalog of the app screens covered by the checklist."""

from collections.abc import Sequence

from a11y_checklist.models.screen import Screen

SCREENS: Sequence[Screen] = (
    Screen(
        id="Dashboard",
        description="Main overview with stats and quick actions",
        icon="house.fill",
        color_tag="blue",
    ),
    Screen(
        id="Tracking",
        description="Track feeding, sleep, and diaper events",
        icon="plus.circle.fill",
        color_tag="green",
    ),
    Screen(
        id="Analytics",
        description="View charts and analytics",
        icon="chart.bar.fill",
        color_tag="purple",
    ),
    Screen(
        id="Settings",
        description="App settings and preferences",
        icon="gearshape.fill",
        color_tag="gray",
    ),
    Screen(
        id="Login",
        description="User login screen",
        icon="person.circle.fill",
        color_tag="blue",
    ),
    Screen(
        id="Register",
        description="User registration screen",
        icon="person.circle.fill",
        color_tag="blue",
    ),
    Screen(
        id="Onboarding",
        description="First-time user onboarding",
        icon="hand.wave.fill",
        color_tag="blue",
    ),
    Screen(
        id="Child Profile",
        description="Child profile management",
        icon="person.crop.circle",
        color_tag="orange",
    ),
    Screen(
        id="Feeding List",
        description="List of feeding events",
        icon="fork.knife.circle.fill",
        color_tag="green",
    ),
    Screen(
        id="Add Feeding",
        description="Add new feeding event",
        icon="fork.knife.circle.fill",
        color_tag="green",
    ),
    Screen(
        id="Sleep List",
        description="List of sleep sessions",
        icon="moon.zzz.fill",
        color_tag="indigo",
    ),
    Screen(
        id="Sleep Timer",
        description="Sleep timer interface",
        icon="moon.zzz.fill",
        color_tag="indigo",
    ),
    Screen(
        id="Diaper List",
        description="List of diaper changes",
        icon="drop.fill",
        color_tag="blue",
    ),
    Screen(
        id="Reminders List",
        description="Manage reminders",
        icon="clock.fill",
        color_tag="purple",
    ),
)


class ScreenNotFoundError(Exception):
    """Raised when a screen id is not part of the catalog."""


def all_screens() -> Sequence[Screen]:
    """Return every screen in catalog order."""
    return SCREENS


def find_screen(screens: Sequence[Screen], screen_id: str) -> Screen:
    """Look up a screen by its identifier within the given screens.

    Raises:
        ScreenNotFoundError: If no screen has the id

    """
    for screen in screens:
        if screen.id == screen_id:
            return screen
    raise ScreenNotFoundError(
        f"Screen '{screen_id}' not found. "
        f"Available screens: {[screen.id for screen in screens]}"
    )


def get_screen(screen_id: str) -> Screen:
    """Look up a screen of the full catalog by its identifier."""
    return find_screen(SCREENS, screen_id)
