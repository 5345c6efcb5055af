from java_format.options import JavaFormatterOptions

from .models import FormatterOptionsModel


def options_to_model(options: JavaFormatterOptions) -> FormatterOptionsModel:
    """Convert the frozen options dataclass to an external Pydantic model"""
    return FormatterOptionsModel(
        style=options.style,
        format_javadoc=options.format_javadoc,
        single_line_javadoc_style=options.single_line_javadoc_style,
        space_inside_empty_block=options.space_inside_empty_block,
    )
