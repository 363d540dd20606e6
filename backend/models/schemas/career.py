"""Career catalog entry: static reference data loaded once at startup."""

from pydantic import ConfigDict

from models.schemas.base import CamelModel


class CareerDefinition(CamelModel):
    """A single career in the catalog.

    Sequence fields keep their authored order: ``required_skills`` order is the
    display priority and ``education_paths[0]`` is the primary route used by
    the learning path builder.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    required_skills: tuple[str, ...] = ()
    education_paths: tuple[str, ...] = ()
    salary_range: str = ""  # descriptive, e.g. "₹4-15 LPA"
    growth_rate: str = ""  # descriptive, e.g. "23%"
    top_employers: tuple[str, ...] = ()
    key_locations: tuple[str, ...] = ()
