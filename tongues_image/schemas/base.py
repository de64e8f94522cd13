from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """외부로 노출되는 JSON 스키마 (camelCase 키)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
