"""End-to-end validation of nested domain objects.

Builds realistic chains mixing mapping, conditional, collection and
optional-value steps, the way application code composes them.
"""

from dataclasses import dataclass, field

import pytest

from chainval import ValidationError, ValidationService, Validator
from chainval.predicates import not_in, numbers, of, strings
from chainval.validation.validators import each_of, if_present


@dataclass
class Address:
    city: str
    street: str
    building_number: int


@dataclass
class Person:
    first_name: str | None = None
    second_name: str | None = None
    last_name: str | None = None
    age: int = 0
    address: Address | None = None
    nicknames: list[str] = field(default_factory=list)
    gender: str | None = None


def address_validator() -> Validator:
    return (
        Validator.not_null("Address is required")
        .then_map(lambda a: a.city, strings.is_blank, "City must not be blank")
        .then_map(lambda a: a.street, strings.is_blank, "Street must not be blank")
        .then_map(
            lambda a: a.building_number,
            numbers.is_negative,
            "Building number must be positive",
        )
    )


def person_validator() -> Validator:
    return (
        Validator.not_null("Person must be provided")
        .then_map(
            lambda p: p.first_name,
            of(strings.is_blank) | strings.min_length(6),
            lambda name: f"FirstName '{name}' must be at least 6 characters long",
        )
        .then_map(
            lambda p: p.second_name,
            Validator.empty().then_if(
                strings.not_blank,
                strings.min_length(6),
                "Minimum second name length is 6",
            ),
        )
        .then_map(lambda p: p.last_name, strings.is_blank, "Last name must not be empty")
        .then_map(
            lambda p: p.age,
            of(numbers.is_negative) | numbers.maximum(100),
            "Age has to be greater than 0 and less than 100",
        )
        .then_map(lambda p: p.address, address_validator())
        .then_map(
            lambda p: p.nicknames,
            each_of(
                lambda nickname, nicknames: strings.is_blank(nickname),
                lambda nickname, nicknames: f"Nickname must not be blank {nicknames}",
                with_collection=True,
            ),
        )
        .then_map(
            lambda p: p.gender,
            if_present(not_in("MALE", "FEMALE"), lambda g: f"Unknown gender {g}"),
        )
    )


@pytest.fixture
def valid_person():
    return Person(
        first_name="FirstName",
        second_name="SecondName",
        last_name="LastName",
        age=76,
        address=Address("MyCity", "MyStreet", 13),
        nicknames=["one", "two"],
    )


class TestAgeScenario:
    """The not-null-then-age chain from the library overview."""

    @pytest.fixture
    def validator(self):
        return Validator.not_null("must not be null").then_map(
            lambda person: person.age, lambda age: age < 0, "age must be non-negative"
        )

    def test_null_person(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(None)
        assert exc_info.value.message == "must not be null"

    def test_negative_age(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(Person(age=-1))
        assert exc_info.value.message == "age must be non-negative"

    def test_valid_person_is_returned_as_is(self, validator):
        person = Person(age=30)
        assert validator.validate(person) is person


class TestNestedPersonValidation:
    """Nested validators over a Person aggregate."""

    def test_valid_person(self, valid_person):
        assert person_validator().validate(valid_person) is valid_person

    def test_missing_person(self):
        with pytest.raises(ValidationError, match="Person must be provided"):
            person_validator().validate(None)

    def test_short_first_name(self, valid_person):
        valid_person.first_name = "Ann"

        with pytest.raises(ValidationError, match="FirstName 'Ann' must be"):
            person_validator().validate(valid_person)

    def test_blank_second_name_is_skipped(self, valid_person):
        valid_person.second_name = ""

        person_validator().validate(valid_person)

    def test_short_second_name(self, valid_person):
        valid_person.second_name = "Li"

        with pytest.raises(ValidationError, match="Minimum second name length is 6"):
            person_validator().validate(valid_person)

    @pytest.mark.parametrize("age", [-1, 101])
    def test_age_out_of_range(self, valid_person, age):
        valid_person.age = age

        with pytest.raises(ValidationError, match="Age has to be"):
            person_validator().validate(valid_person)

    def test_missing_address(self, valid_person):
        valid_person.address = None

        with pytest.raises(ValidationError, match="Address is required"):
            person_validator().validate(valid_person)

    def test_nested_address_failure(self, valid_person):
        valid_person.address = Address("MyCity", " ", 13)

        with pytest.raises(ValidationError, match="Street must not be blank"):
            person_validator().validate(valid_person)

    def test_blank_nickname_reports_collection(self, valid_person):
        valid_person.nicknames = ["one", " "]

        with pytest.raises(ValidationError, match=r"Nickname must not be blank \['one', ' '\]"):
            person_validator().validate(valid_person)

    def test_optional_gender(self, valid_person):
        person_validator().validate(valid_person)

        valid_person.gender = "FEMALE"
        person_validator().validate(valid_person)

        valid_person.gender = "unknown"
        with pytest.raises(ValidationError, match="Unknown gender unknown"):
            person_validator().validate(valid_person)

    def test_first_failure_wins(self, valid_person):
        valid_person.first_name = None
        valid_person.age = -5

        error = person_validator().collect(valid_person)

        assert error is not None
        assert error.message.startswith("FirstName 'None'")


class TestAggregatedPersonValidation:
    """Caller-side aggregation of independent chains."""

    def test_reports_every_failing_section(self, valid_person):
        valid_person.last_name = ""
        valid_person.address = Address("", "MyStreet", 1)
        service = ValidationService(
            {
                "names": Validator.empty().then_map(
                    lambda p: p.last_name, strings.is_blank, "Last name must not be empty"
                ),
                "address": Validator.empty().then_map(
                    lambda p: p.address, address_validator()
                ),
                "age": Validator.empty().then_map(
                    lambda p: p.age, numbers.is_negative, "Age must be non-negative"
                ),
            }
        )

        results = service.validate_all(valid_person)

        assert service.errors(results) == [
            "Last name must not be empty",
            "City must not be blank",
        ]
        assert results["age"].success
