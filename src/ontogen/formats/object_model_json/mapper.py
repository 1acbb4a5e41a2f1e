"""Identity language mapper for the Object Model JSON output."""

import logging

from ontogen.shared.models.object_model import ObjectModel
from ontogen.shared.models.options import GeneratorOptions

logger = logging.getLogger(__name__)


class JsonMapper:
    """Map the Object Model to itself."""

    def model_to_view_model(self, model: ObjectModel, options: GeneratorOptions) -> ObjectModel:
        logger.debug("Identity mapping of the object model")
        return model
