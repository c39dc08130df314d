from pydantic import BaseModel, ConfigDict, Field


class Name(BaseModel):
    model_config = ConfigDict(extra="ignore")

    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)


class Address(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    street: str = Field(..., min_length=1)
    houseNumber: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    zipCode: str = Field(..., min_length=1)


class ContactDocument(BaseModel):
    """Shape every persisted contact document must have (identifier excluded)."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: Name
    email: str = Field(..., min_length=1, max_length=50)
    phoneNumber: str = Field(..., min_length=1)
    address: Address


def blank_contact() -> dict:
    return {
        "name": {"firstName": "", "lastName": ""},
        "email": "",
        "phoneNumber": "",
        "address": {"street": "", "houseNumber": "", "city": "", "zipCode": ""},
    }
