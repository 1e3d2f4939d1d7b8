from pydantic import BaseModel, ConfigDict, Field


class CacheStatus(BaseModel):
    is_cached: bool = Field(serialization_alias="isCached")
    is_valid: bool = Field(serialization_alias="isValid")
    product_count: int = Field(serialization_alias="productCount")
    cache_age: int = Field(serialization_alias="cacheAge", description="seconds since the last fill")
    expires_in: int = Field(serialization_alias="expiresIn", description="seconds until expiry")

    model_config = ConfigDict(populate_by_name=True)
