"""Tests for request option validation."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.geocoding.exceptions import InvalidRequest
from spatial_geocoder.geocoding.options import parse_location, resolve_options
from spatial_geocoder.geocoding.providers.esri import EsriOptions
from spatial_geocoder.geocoding.providers.here import HereOptions
from spatial_geocoder.geocoding.providers.tamu import TamuOptions


class TestResolveOptions:
    """Tests for resolve_options."""

    def test_valid_options_resolved_with_defaults(self, factory):
        """Test provider defaults fill in options the caller left out."""
        options = resolve_options(
            EsriOptions, {"factory": factory, "address": "380 New York St"}
        )

        assert options.address == "380 New York St"
        assert options.path.endswith("findAddressCandidates")
        assert options.city is None
        assert options.srid == 4326

    def test_caller_options_override_defaults(self, factory):
        """Test a caller-supplied path wins over the provider default."""
        options = resolve_options(
            EsriOptions,
            {"factory": factory, "address": "380 New York St", "path": "custom"},
        )

        assert options.path == "custom"

    def test_postal_code_accepts_int(self, factory):
        """Test postal_code may be given as an integer."""
        options = resolve_options(
            EsriOptions, {"factory": factory, "address": "x", "postal_code": 92373}
        )

        assert options.postal_code == 92373

    @pytest.mark.parametrize("missing", ["factory", "address"])
    def test_missing_required_option(self, factory, missing):
        """Test a missing required option names the key."""
        options = {"factory": factory, "address": "380 New York St"}
        del options[missing]

        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(EsriOptions, options)

        assert exc_info.value.option == missing
        assert str(exc_info.value) == f"Missing required option '{missing}'"

    def test_wrong_type_for_address(self, factory):
        """Test values are not coerced to the declared type."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(EsriOptions, {"factory": factory, "address": 380})

        assert exc_info.value.option == "address"
        assert str(exc_info.value) == "Option 'address' must be of type str"

    def test_wrong_type_for_postal_code(self, factory):
        """Test the allowed types are listed for union options."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(
                EsriOptions,
                {"factory": factory, "address": "x", "postal_code": 92373.0},
            )

        assert str(exc_info.value) == "Option 'postal_code' must be of type str | int"

    def test_wrong_type_for_factory(self):
        """Test the factory must be a GeometryFactory."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(EsriOptions, {"factory": 4326, "address": "x"})

        assert exc_info.value.option == "factory"
        assert "GeometryFactory" in str(exc_info.value)

    def test_unknown_option(self, factory):
        """Test keys outside the model are rejected."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(EsriOptions, {"factory": factory, "address": "x", "zip": "1"})

        assert exc_info.value.option == "zip"
        assert str(exc_info.value) == "Unknown option 'zip'"

    @pytest.mark.parametrize("address", ["", "   "])
    def test_empty_address(self, factory, address):
        """Test an empty address is rejected."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(EsriOptions, {"factory": factory, "address": address})

        assert exc_info.value.option == "address"
        assert "address cannot be empty" in str(exc_info.value)

    def test_wgs84_only_provider_rejects_other_srid(self):
        """Test WGS84-only option models reject other spatial references."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(
                HereOptions, {"factory": GeometryFactory(3857), "address": "x"}
            )

        assert exc_info.value.option == "factory"
        assert "must be 4326, got 3857" in str(exc_info.value)

    def test_any_srid_accepted_by_generic_options(self):
        """Test the generic options model accepts any SRID."""
        options = resolve_options(
            EsriOptions, {"factory": GeometryFactory(3857), "address": "x"}
        )

        assert options.srid == 3857

    def test_options_must_be_mapping(self):
        """Test non-mapping options are rejected."""
        with pytest.raises(InvalidRequest, match="must be a mapping"):
            resolve_options(EsriOptions, ["380 New York St"])

    def test_resolved_options_are_immutable(self, factory):
        """Test validated options cannot be modified."""
        options = resolve_options(EsriOptions, {"factory": factory, "address": "x"})

        with pytest.raises(ValueError):
            options.address = "y"


class TestResolveOptionsOrder:
    """Tests for the order in which option violations are reported."""

    @pytest.mark.parametrize(
        "model_cls,options,expected",
        [
            # Mistyped key reported before the WGS84 constraint
            (
                HereOptions,
                {"factory": GeometryFactory(3857), "address": "x", "city": 5},
                "city",
            ),
            # Mistyped key reported before an unsupported census year
            (
                TamuOptions,
                {
                    "factory": GeometryFactory(4326),
                    "address": "x",
                    "api_key": "k",
                    "census_year": 2020,
                    "allow_ties": "no",
                },
                "allow_ties",
            ),
            (
                TamuOptions,
                {
                    "factory": GeometryFactory(3857),
                    "address": "x",
                    "api_key": "k",
                    "tie_breaking_strategy": 7,
                },
                "tie_breaking_strategy",
            ),
            # Unknown key reported before the WGS84 constraint
            (
                HereOptions,
                {"factory": GeometryFactory(3857), "address": "x", "zip": "32830"},
                "zip",
            ),
            # Mistyped key reported before an empty address
            (
                EsriOptions,
                {"factory": GeometryFactory(4326), "address": "", "postal_code": 1.5},
                "postal_code",
            ),
            # Missing key reported before anything else
            (
                HereOptions,
                {"factory": GeometryFactory(3857), "city": 5},
                "address",
            ),
            # Constraints alone are reported in declaration order
            (
                HereOptions,
                {"factory": GeometryFactory(3857), "address": ""},
                "factory",
            ),
        ],
    )
    def test_violation_reported(self, model_cls, options, expected):
        """Test missing, then mistyped or unknown, then constraint violations."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(model_cls, options)

        assert exc_info.value.option == expected

    def test_type_error_message_with_constraint_violation(self):
        """Test the reported message describes the type violation."""
        with pytest.raises(InvalidRequest) as exc_info:
            resolve_options(
                HereOptions,
                {"factory": GeometryFactory(3857), "address": "x", "city": 5},
            )

        assert str(exc_info.value) == "Option 'city' must be of type str"


class TestCredentialOptions:
    """Tests for passing service credentials."""

    def test_credentials_travel_in_headers(self, factory):
        """Test an Authorization header is accepted as-is."""
        options = resolve_options(
            EsriOptions,
            {
                "factory": factory,
                "address": "x",
                "headers": {"Authorization": "Bearer token"},
            },
        )

        assert options.headers == {"Authorization": "Bearer token"}

    def test_auth_option_is_not_accepted(self, factory):
        """Test credentials are not a separate option."""
        with pytest.raises(InvalidRequest, match="Unknown option 'auth'"):
            resolve_options(
                EsriOptions,
                {"factory": factory, "address": "x", "auth": ("user", "secret")},
            )


class TestParseLocation:
    """Tests for parse_location."""

    @pytest.mark.parametrize(
        "location",
        [
            [-76.93067442482834, 38.84717175217679],
            (-76.93067442482834, 38.84717175217679),
            {"x": -76.93067442482834, "y": 38.84717175217679},
            {0: -76.93067442482834, 1: 38.84717175217679},
            ["-76.93067442482834", "38.84717175217679"],
        ],
    )
    def test_accepted_forms(self, location):
        """Test pairs, mappings and numeric strings are accepted."""
        assert parse_location(location) == (-76.93067442482834, 38.84717175217679)

    @pytest.mark.parametrize(
        "location,message,option",
        [
            ([], "Missing longitude (x) coordinate", "x"),
            ([-76.9], "Missing latitude (y) coordinate", "y"),
            ({"y": 38.8}, "Missing longitude (x) coordinate", "x"),
            ({"x": -76.9}, "Missing latitude (y) coordinate", "y"),
            ([None, 38.8], "Missing longitude (x) coordinate", "x"),
        ],
    )
    def test_missing_coordinate(self, location, message, option):
        """Test a missing coordinate names the axis."""
        with pytest.raises(InvalidRequest) as exc_info:
            parse_location(location)

        assert str(exc_info.value) == message
        assert exc_info.value.option == option

    @pytest.mark.parametrize(
        "location,axis",
        [
            (["west", 38.8], "x"),
            ([-76.9, "north"], "y"),
            ([True, 38.8], "x"),
            ([-76.9, math.nan], "y"),
            ([math.inf, 38.8], "x"),
        ],
    )
    def test_non_numeric_coordinate(self, location, axis):
        """Test either coordinate being non-numeric is rejected."""
        with pytest.raises(InvalidRequest) as exc_info:
            parse_location(location)

        assert str(exc_info.value).startswith(f"Non-numeric coordinate for {axis}")

    def test_unsupported_location_type(self):
        """Test a bare string is not a location."""
        with pytest.raises(InvalidRequest, match="Location must be"):
            parse_location("-76.9,38.8")

    @pytest.mark.parametrize(
        "location,expected",
        [
            ([Decimal("-76.93"), Decimal("38.85")], (-76.93, 38.85)),
            ([Fraction(-153, 2), Fraction(77, 2)], (-76.5, 38.5)),
        ],
    )
    def test_other_real_number_types(self, location, expected):
        """Test real numbers beyond int and float are accepted."""
        assert parse_location(location) == expected

    def test_decimal_nan_rejected(self):
        """Test non-finite decimals are rejected."""
        with pytest.raises(InvalidRequest, match="Non-numeric coordinate for x"):
            parse_location([Decimal("NaN"), 38.85])
