"""
Demo Service - composes and runs both pattern demos.

This service builds one client per configured platform and invokes the
client's operations in a fixed order, collecting the action records.
"""

from typing import List, Optional

from src.core.config import get_config, Config
from src.core.logging import get_logger
from src.factories.dialog import create_dialog
from src.factories.gui_factory import get_gui_factory
from src.products.base import ActionRecord
from src.services.dialog_application import DialogApplication
from src.services.gui_application import GUIApplication

logger = get_logger(__name__)


class DemoService:
    """
    Service for running the Abstract Factory and Factory Method demos.

    Platforms come from configuration. Unknown platforms raise
    ``UnknownPlatformError`` before any client is built for them.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize Demo Service.

        Args:
            config: Optional Config instance
        """
        self.config = config or get_config()

    def run_abstract_factory_demo(self) -> List[ActionRecord]:
        """
        Run the Abstract Factory demo.

        For each configured platform, renders the checkbox image and then
        sends the button event.

        Returns:
            List of action records in emission order
        """
        logger.info(
            "Running abstract factory demo for "
            f"{[p.value for p in self.config.factory_platforms]}"
        )
        records: List[ActionRecord] = []
        for platform in self.config.factory_platforms:
            application = GUIApplication(factory=get_gui_factory(platform))
            for record in (application.render_image(), application.send_event()):
                if record is not None:
                    records.append(record)
        return records

    def run_factory_method_demo(self) -> List[ActionRecord]:
        """
        Run the Factory Method demo.

        For each configured platform, clicks through one dialog application.

        Returns:
            List of action records in emission order
        """
        logger.info(
            "Running factory method demo for "
            f"{[p.value for p in self.config.dialog_platforms]}"
        )
        records: List[ActionRecord] = []
        for platform in self.config.dialog_platforms:
            application = DialogApplication(dialog=create_dialog(platform))
            records.extend(application.on_click())
        return records

    def run_all(self) -> List[ActionRecord]:
        """Run the abstract factory demo, then the factory method demo."""
        return self.run_abstract_factory_demo() + self.run_factory_method_demo()
