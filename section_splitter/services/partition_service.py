import logging

from ..models.dividing_line import DetectionResult
from ..models.partition import Partition
from ..models.rectangle import Rectangle
from ..errors import InvalidPartition

logger = logging.getLogger(__name__)


class PartitionService:
    """Turns two dividing lines into validated top / middle / bottom regions."""

    @staticmethod
    def build(width: int, height: int, detection: DetectionResult) -> Partition:
        first, second = detection.lines
        return Partition(
            top=Rectangle(0, 0, width, first.start),
            middle=Rectangle(0, first.end, width, second.start - first.end),
            bottom=Rectangle(0, second.end, width, height - second.end),
        )

    @staticmethod
    def validate(partition: Partition, width: int, height: int) -> None:
        for name, rect in partition.named():
            if not rect.fits_within(width, height):
                raise InvalidPartition(name, rect)

    def partition(self, width: int, height: int, detection: DetectionResult) -> Partition:
        """
        Raises:
            InvalidPartition: if any region is out of bounds or empty,
            e.g. when the second line starts before the first one ends.
        """
        result = self.build(width, height, detection)
        self.validate(result, width, height)
        for name, rect in result.named():
            logger.debug("%s section: %s", name, rect)
        return result
