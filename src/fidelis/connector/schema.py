''' Field-level shape of the identity and registry responses.

    The envelope (`success`, `data`) is checked by ServiceConnector. These
    models check the `data` members the connectors read. Text fields must be
    strings; anything else makes the whole body malformed, which sends the
    lookup to its fallback tier.
'''
from typing import Annotated, Optional, Union

from pydantic import BeforeValidator, ConfigDict, ValidationError

from fidelis.data import DataModel
from fidelis.error import MalformedResponseError


def _as_text(value):
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValueError(f'expected text, got {type(value).__name__}')

    return " ".join(value.split()) or None


def _as_code(value):
    # bool is an int
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    return _as_text(value)


Text = Annotated[Optional[str], BeforeValidator(_as_text)]
Code = Annotated[Optional[str], BeforeValidator(_as_code)]


class ServiceData(DataModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    @classmethod
    def parse(cls, data, url_hint):
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(
                "C01.508", f"Service [{url_hint}] returned malformed fields",
                [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()]
            ) from e


class IdentityData(ServiceData):
    status: Code = None
    full_name: Text = None
    first_name: Text = None
    last_name: Text = None
    dob: Text = None
    gender: Text = None


class RegistryData(ServiceData):
    maker_description: Text = None
    maker_model: Text = None
    manufacturing_date_formatted: Code = None
    fuel_type: Text = None
    color: Text = None
    owner_name: Text = None
    financer: Optional[Union[dict, str]] = None
    hypothecation_details: Optional[Union[dict, str]] = None
    registration_date: Text = None
    present_address: Text = None
