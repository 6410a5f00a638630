# models/validation.py

from typing import List
from pydantic import BaseModel, ConfigDict, Field

class BlueprintValidation(BaseModel):
    """Outcome of validating a blueprint. `errors` is empty iff `valid`."""
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: List[str] = Field(default_factory=list, description="Violations in the order the checks run.")
