from typing import Literal

from pydantic import BaseModel, Field, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class SeedUser(BaseModel):
    id: int = Field(ge=0)
    name: str
    email: str

class UsersRules(BaseModel):
    seed_enabled: bool = True
    # None keeps the built-in Alice/Bob seed
    seed: list[SeedUser] | None = None

    @model_validator(mode="after")
    def check_unique_seed_ids(self) -> "UsersRules":
        if self.seed:
            ids = [user.id for user in self.seed]
            if len(ids) != len(set(ids)):
                raise ValueError("users.seed contains duplicate ids")
        return self

class ProcessingRules(BaseModel):
    default_strategy: str = "upper"

class LoggingRules(BaseModel):
    level: LogLevel = "INFO"

class Rules(BaseModel):
    project: ProjectRules
    users: UsersRules = Field(default_factory=UsersRules)
    processing: ProcessingRules = Field(default_factory=ProcessingRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
