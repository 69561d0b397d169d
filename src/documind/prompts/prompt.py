from pydantic import BaseModel


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: str) -> str:
        """Fill ``{placeholders}`` in the template.

        Raises:
            ValueError: If a declared input is missing or an undeclared one is given.
        """
        missing = set(self.inputs) - set(values)
        if missing:
            raise ValueError(
                f"Prompt '{self.name}' missing inputs: {', '.join(sorted(missing))}"
            )
        unknown = set(values) - set(self.inputs)
        if unknown:
            raise ValueError(
                f"Prompt '{self.name}' got unknown inputs: {', '.join(sorted(unknown))}"
            )
        return self.template.format(**values)
