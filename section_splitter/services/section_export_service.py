import logging
from pathlib import Path
from typing import Union

from ..models.image import Image
from ..models.partition import SectionSpec
from ..models.rectangle import Rectangle
from ..errors import ExportFailed
from .alpha_service import AlphaService
from .image_service import ImageService

logger = logging.getLogger(__name__)


class SectionExportService:
    """
    Crop → resize → opacify → write, for one section of the working image.
    """

    def __init__(self, image_service: ImageService = None, alpha_service: AlphaService = None):
        self.image_service = image_service or ImageService()
        self.alpha_service = alpha_service or AlphaService()

    def render(self, working: Image, rect: Rectangle, spec: SectionSpec) -> Image:
        """Build the section image in memory; *working* is never modified."""
        cropped = self.image_service.crop_pixels(working, rect)
        resized = self.image_service.resize_pixels(cropped, spec.size)
        section = self.image_service.create_image(resized)
        return self.alpha_service.strip_alpha(section)

    def export(
        self,
        working: Image,
        rect: Rectangle,
        spec: SectionSpec,
        output_path: Union[str, Path],
    ) -> Path:
        output_path = Path(output_path)
        section = self.render(working, rect, spec)
        section.path = output_path
        try:
            self.image_service.save(section)
        except (OSError, ValueError) as err:
            raise ExportFailed(spec.name, output_path, str(err)) from err

        logger.info("Saved %s section (%dx%d) to %s", spec.name, spec.width, spec.height, output_path)
        return output_path
