from pydantic import BaseModel, ConfigDict, computed_field

from java_format.options import SingleLineJavadocStyle, Style


class FormatterOptionsModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    style: Style
    format_javadoc: bool
    single_line_javadoc_style: SingleLineJavadocStyle
    space_inside_empty_block: bool

    @computed_field
    @property
    def indentation_multiplier(self) -> int:
        return self.style.indentation_multiplier()
