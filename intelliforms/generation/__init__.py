from intelliforms.generation.base import BaseFormGenerator
from intelliforms.generation.factory import GeneratorFactory
from intelliforms.generation.generator import FormGenerator

__all__ = ["BaseFormGenerator", "FormGenerator", "GeneratorFactory"]
