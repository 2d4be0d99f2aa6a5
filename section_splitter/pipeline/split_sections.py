"""
Section Splitter Pipeline
Crops transparent borders off one image, finds the two dividing bands and
writes the top, middle and bottom sections as fixed-size opaque images.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import Settings, get_settings
from ..errors import ExportFailed, ImageFileNotFound
from ..models.image import Image
from ..models.partition import SplitResult
from ..services.alpha_service import AlphaService
from ..services.image_service import ImageService
from ..services.line_detection_service import LineDetectionService
from ..services.partition_service import PartitionService
from ..services.row_profile_service import RowProfileService
from ..services.section_export_service import SectionExportService

logger = logging.getLogger(__name__)


def build_working_image(
    source: Image,
    *,
    alpha_service: AlphaService,
    image_service: ImageService,
) -> Image:
    """
    Crop *source* to its non-transparent content and make the copy opaque.
    The source pixels are left untouched.
    """
    bounds = alpha_service.find_content_bounds(source.pixels)
    cropped = image_service.create_image(image_service.crop_pixels(source, bounds))
    return alpha_service.strip_alpha(cropped)


def split_sections(
    input_path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    *,
    settings: Optional[Settings] = None,
    image_service: Optional[ImageService] = None,
    alpha_service: Optional[AlphaService] = None,
    row_profile_service: Optional[RowProfileService] = None,
    line_detection_service: Optional[LineDetectionService] = None,
    partition_service: Optional[PartitionService] = None,
    section_export_service: Optional[SectionExportService] = None,
) -> SplitResult:
    """
    Run the whole split for one image.

    Steps:
    1. Load the image (must exist and decode)
    2. Crop away fully transparent borders and make the copy opaque
    3. Profile row colours and detect two dividing lines (or fall back to thirds)
    4. Partition into top / middle / bottom, validate, save the alpha-cropped copy
    5. Crop, resize and save each section

    Args:
        input_path: Image to split.
        output_dir: Where outputs go; defaults to the input's directory.
        settings: Thresholds, target sizes and file names.

    Returns:
        SplitResult: paths written plus the partition and detection details.

    Raises:
        SectionSplitterError: any stage failure. Files written before the
        failure stay on disk.
    """
    settings = settings or get_settings()
    image_service = image_service or ImageService(load_timeout=settings.load_timeout)
    alpha_service = alpha_service or AlphaService()
    row_profile_service = row_profile_service or RowProfileService()
    line_detection_service = line_detection_service or LineDetectionService(
        max_line_thickness=settings.max_line_thickness,
        threshold=settings.diff_threshold,
    )
    partition_service = partition_service or PartitionService()
    section_export_service = section_export_service or SectionExportService(
        image_service=image_service, alpha_service=alpha_service
    )

    input_path = Path(input_path)
    if not input_path.exists():
        raise ImageFileNotFound(input_path)
    output_dir = Path(output_dir) if output_dir is not None else input_path.parent

    # Step 1: load
    source = image_service.load(input_path)

    # Step 2: alpha crop
    working = build_working_image(source, alpha_service=alpha_service, image_service=image_service)

    # Step 3: dividing lines
    profile = row_profile_service.profile(working)
    detection = line_detection_service.detect(profile)

    # Step 4: regions, validated before anything is written
    partition = partition_service.partition(working.width, working.height, detection)

    output_dir.mkdir(parents=True, exist_ok=True)
    working.path = output_dir / settings.alpha_cropped_name
    try:
        image_service.save(working)
    except (OSError, ValueError) as err:
        raise ExportFailed("alpha-cropped", working.path, str(err)) from err
    logger.info("Alpha channel cropped image saved to %s (%dx%d)",
                working.path, working.width, working.height)

    # Step 5: sections
    section_paths = {}
    for spec, rect in zip(settings.sections, partition):
        section_paths[spec.name] = section_export_service.export(
            working, rect, spec, output_dir / spec.filename
        )

    logger.info("Images cropped, resized, and saved to %s", output_dir)
    return SplitResult(
        alpha_cropped_path=working.path,
        section_paths=section_paths,
        partition=partition,
        detection=detection,
    )
