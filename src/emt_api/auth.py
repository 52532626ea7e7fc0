"""
Credentials for the MobilityLabs login endpoint.

Client-application login: the registered client id and its pass key travel as
request headers on a GET, not as a body.
"""

from pydantic import BaseModel, ConfigDict, SecretStr


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str
    pass_key: SecretStr

    def headers(self) -> dict[str, str]:
        return {"X-ClientId": self.client_id, "passKey": self.pass_key.get_secret_value()}
