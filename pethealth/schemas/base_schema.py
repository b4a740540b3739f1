from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON은 camelCase, 파이썬 속성은 snake_case (입력은 둘 다 허용)"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
