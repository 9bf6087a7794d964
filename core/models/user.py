from pydantic import BaseModel, ConfigDict


class GithubUser(BaseModel):
    """Subset of the GitHub `GET /users/{username}` payload shown on screen."""

    model_config = ConfigDict(extra="ignore")

    login: str
    name: str | None = None
    avatar_url: str
    html_url: str
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @property
    def url(self) -> str:
        """Public profile page (the payload's own `url` points at the API)."""
        return self.html_url
