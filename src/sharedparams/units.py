"""Module units of sharedparams.

Defines the enumerations of Revit parameter data types (ParameterType),
unit types (UnitType) and discipline-based unit groups (UnitGroup), as
well as the fixed table that associates a UnitType to each data type.

The values of ParameterType members are the tokens that appear in the
DATATYPE column of a shared parameter file. Those of UnitType are the
names used by the Revit API.
"""

__copyright__ = 'Copyright (c) 2026 sharedparams developers'
__created__ = '2026-10-18'
__license__ = 'GPLv3+'

from enum import Enum  # Unfortunately StrEnum was introduced in py3.11
from types import MappingProxyType


class UnitGroup(Enum):
    """A group of related unit types, primarily classified by discipline."""

    COMMON = 'Common'
    STRUCTURAL = 'Structural'
    HVAC = 'HVAC'
    ELECTRICAL = 'Electrical'
    PIPING = 'Piping'
    ENERGY = 'Energy'


class ParameterType(str, Enum):
    """The data type of a shared parameter."""

    INVALID = 'INVALID'
    TEXT = 'TEXT'
    INTEGER = 'INTEGER'
    NUMBER = 'NUMBER'
    LENGTH = 'LENGTH'
    AREA = 'AREA'
    VOLUME = 'VOLUME'
    ANGLE = 'ANGLE'
    SLOPE = 'SLOPE'
    CURRENCY = 'CURRENCY'
    MASS_DENSITY = 'MASS_DENSITY'
    URL = 'URL'
    MATERIAL = 'MATERIAL'
    IMAGE = 'IMAGE'
    YESNO = 'YESNO'
    MULTILINETEXT = 'MULTILINETEXT'
    FAMILYTYPE = 'FAMILYTYPE'
    LOAD_CLASSIFICATION = 'LOAD_CLASSIFICATION'
    NUMBER_OF_POLES = 'NUMBER_OF_POLES'
    FIXTURE_UNIT = 'FIXTURE_UNIT'
    # Structural
    FORCE = 'FORCE'
    LINEAR_FORCE = 'LINEAR_FORCE'
    AREA_FORCE = 'AREA_FORCE'
    MOMENT = 'MOMENT'
    LINEAR_MOMENT = 'LINEAR_MOMENT'
    STRESS = 'STRESS'
    UNIT_WEIGHT = 'UNIT_WEIGHT'
    THERMAL_EXPANSION = 'THERMAL_EXPANSION'
    # HVAC
    HVAC_DENSITY = 'HVAC_DENSITY'
    HVAC_ENERGY = 'HVAC_ENERGY'
    HVAC_FRICTION = 'HVAC_FRICTION'
    HVAC_POWER = 'HVAC_POWER'
    HVAC_POWER_DENSITY = 'HVAC_POWER_DENSITY'
    HVAC_PRESSURE = 'HVAC_PRESSURE'
    HVAC_TEMPERATURE = 'HVAC_TEMPERATURE'
    HVAC_VELOCITY = 'HVAC_VELOCITY'
    HVAC_AIR_FLOW = 'HVAC_AIR_FLOW'
    HVAC_DUCT_SIZE = 'HVAC_DUCT_SIZE'
    HVAC_CROSS_SECTION = 'HVAC_CROSS_SECTION'
    HVAC_HEAT_GAIN = 'HVAC_HEAT_GAIN'
    HVAC_ROUGHNESS = 'HVAC_ROUGHNESS'
    HVAC_VISCOSITY = 'HVAC_VISCOSITY'
    # Electrical
    ELECTRICAL_CURRENT = 'ELECTRICAL_CURRENT'
    ELECTRICAL_POTENTIAL = 'ELECTRICAL_POTENTIAL'
    ELECTRICAL_FREQUENCY = 'ELECTRICAL_FREQUENCY'
    ELECTRICAL_ILLUMINANCE = 'ELECTRICAL_ILLUMINANCE'
    ELECTRICAL_LUMINOUS_FLUX = 'ELECTRICAL_LUMINOUS_FLUX'
    ELECTRICAL_POWER = 'ELECTRICAL_POWER'
    ELECTRICAL_APPARENT_POWER = 'ELECTRICAL_APPARENT_POWER'
    ELECTRICAL_POWER_DENSITY = 'ELECTRICAL_POWER_DENSITY'
    # Piping
    PIPING_DENSITY = 'PIPING_DENSITY'
    PIPING_FLOW = 'PIPING_FLOW'
    PIPING_FRICTION = 'PIPING_FRICTION'
    PIPING_PRESSURE = 'PIPING_PRESSURE'
    PIPING_TEMPERATURE = 'PIPING_TEMPERATURE'
    PIPING_VELOCITY = 'PIPING_VELOCITY'
    PIPING_VISCOSITY = 'PIPING_VISCOSITY'
    PIPING_ROUGHNESS = 'PIPING_ROUGHNESS'
    PIPING_VOLUME = 'PIPING_VOLUME'
    PIPE_SIZE = 'PIPE_SIZE'

    def __str__(self):
        """Return the DATATYPE token of this parameter type."""
        return self.value

    @classmethod
    def from_token(cls, token):
        """Return the ParameterType for a DATATYPE `token`, or None."""
        try:
            return cls(token.strip().upper())
        except ValueError:
            return None

    @property
    def unit_type(self):
        """Return the UnitType associated with this parameter type."""
        return get_unit_type(self)


class UnitType(Enum):
    """The type of physical unit of the value of a parameter."""

    UT_UNDEFINED = 'UT_Undefined'
    UT_NUMBER = 'UT_Number'
    UT_LENGTH = 'UT_Length'
    UT_AREA = 'UT_Area'
    UT_VOLUME = 'UT_Volume'
    UT_ANGLE = 'UT_Angle'
    UT_SLOPE = 'UT_Slope'
    UT_CURRENCY = 'UT_Currency'
    UT_MASS_DENSITY = 'UT_MassDensity'
    UT_FORCE = 'UT_Force'
    UT_LINEAR_FORCE = 'UT_LinearForce'
    UT_AREA_FORCE = 'UT_AreaForce'
    UT_MOMENT = 'UT_Moment'
    UT_LINEAR_MOMENT = 'UT_LinearMoment'
    UT_STRESS = 'UT_Stress'
    UT_UNIT_WEIGHT = 'UT_UnitWeight'
    UT_THERMAL_EXPANSION = 'UT_ThermalExpansion'
    UT_HVAC_DENSITY = 'UT_HVAC_Density'
    UT_HVAC_ENERGY = 'UT_HVAC_Energy'
    UT_HVAC_FRICTION = 'UT_HVAC_Friction'
    UT_HVAC_POWER = 'UT_HVAC_Power'
    UT_HVAC_POWER_DENSITY = 'UT_HVAC_Power_Density'
    UT_HVAC_PRESSURE = 'UT_HVAC_Pressure'
    UT_HVAC_TEMPERATURE = 'UT_HVAC_Temperature'
    UT_HVAC_VELOCITY = 'UT_HVAC_Velocity'
    UT_HVAC_AIRFLOW = 'UT_HVAC_Airflow'
    UT_HVAC_DUCT_SIZE = 'UT_HVAC_DuctSize'
    UT_HVAC_CROSS_SECTION = 'UT_HVAC_CrossSection'
    UT_HVAC_HEAT_GAIN = 'UT_HVAC_HeatGain'
    UT_HVAC_ROUGHNESS = 'UT_HVAC_Roughness'
    UT_HVAC_VISCOSITY = 'UT_HVAC_Viscosity'
    UT_ELECTRICAL_CURRENT = 'UT_Electrical_Current'
    UT_ELECTRICAL_POTENTIAL = 'UT_Electrical_Potential'
    UT_ELECTRICAL_FREQUENCY = 'UT_Electrical_Frequency'
    UT_ELECTRICAL_ILLUMINANCE = 'UT_Electrical_Illuminance'
    UT_ELECTRICAL_LUMINOUS_FLUX = 'UT_Electrical_Luminous_Flux'
    UT_ELECTRICAL_POWER = 'UT_Electrical_Power'
    UT_ELECTRICAL_APPARENT_POWER = 'UT_Electrical_Apparent_Power'
    UT_ELECTRICAL_POWER_DENSITY = 'UT_Electrical_Power_Density'
    UT_ELECTRICAL_NUMBER_OF_POLES = 'UT_Electrical_NumberOfPoles'
    UT_PIPING_DENSITY = 'UT_Piping_Density'
    UT_PIPING_FLOW = 'UT_Piping_Flow'
    UT_PIPING_FRICTION = 'UT_Piping_Friction'
    UT_PIPING_PRESSURE = 'UT_Piping_Pressure'
    UT_PIPING_TEMPERATURE = 'UT_Piping_Temperature'
    UT_PIPING_VELOCITY = 'UT_Piping_Velocity'
    UT_PIPING_VISCOSITY = 'UT_Piping_Viscosity'
    UT_PIPING_ROUGHNESS = 'UT_Piping_Roughness'
    UT_PIPING_VOLUME = 'UT_Piping_Volume'
    UT_PIPING_FIXTURE_UNITS = 'UT_Piping_FixtureUnits'
    UT_PIPE_SIZE = 'UT_PipeSize'

    def __str__(self):
        """Return the Revit name of this unit type."""
        return self.value

    @property
    def is_undefined(self):
        """Return whether this is the 'unknown unit' sentinel."""
        return self is UnitType.UT_UNDEFINED

    @property
    def unit_group(self):
        """Return the UnitGroup (i.e., discipline) of this unit type."""
        if self in _STRUCTURAL_UNITS:
            return UnitGroup.STRUCTURAL
        for prefix, group in _UNIT_GROUP_PREFIXES:
            if self.value.startswith(prefix):
                return group
        return UnitGroup.COMMON


_STRUCTURAL_UNITS = frozenset((
    UnitType.UT_FORCE,
    UnitType.UT_LINEAR_FORCE,
    UnitType.UT_AREA_FORCE,
    UnitType.UT_MOMENT,
    UnitType.UT_LINEAR_MOMENT,
    UnitType.UT_STRESS,
    UnitType.UT_UNIT_WEIGHT,
    UnitType.UT_THERMAL_EXPANSION,
    ))
_UNIT_GROUP_PREFIXES = (
    ('UT_HVAC_', UnitGroup.HVAC),
    ('UT_Electrical_', UnitGroup.ELECTRICAL),
    ('UT_Pip', UnitGroup.PIPING),   # UT_Piping_* and UT_PipeSize
    )


# Data types that have no physical unit (e.g., TEXT, YESNO,
# URL, MATERIAL) are deliberately missing from this table.
UNIT_TYPES = MappingProxyType({
    ParameterType.NUMBER: UnitType.UT_NUMBER,
    ParameterType.LENGTH: UnitType.UT_LENGTH,
    ParameterType.AREA: UnitType.UT_AREA,
    ParameterType.VOLUME: UnitType.UT_VOLUME,
    ParameterType.ANGLE: UnitType.UT_ANGLE,
    ParameterType.SLOPE: UnitType.UT_SLOPE,
    ParameterType.CURRENCY: UnitType.UT_CURRENCY,
    ParameterType.MASS_DENSITY: UnitType.UT_MASS_DENSITY,
    ParameterType.NUMBER_OF_POLES: UnitType.UT_ELECTRICAL_NUMBER_OF_POLES,
    ParameterType.FIXTURE_UNIT: UnitType.UT_PIPING_FIXTURE_UNITS,
    ParameterType.FORCE: UnitType.UT_FORCE,
    ParameterType.LINEAR_FORCE: UnitType.UT_LINEAR_FORCE,
    ParameterType.AREA_FORCE: UnitType.UT_AREA_FORCE,
    ParameterType.MOMENT: UnitType.UT_MOMENT,
    ParameterType.LINEAR_MOMENT: UnitType.UT_LINEAR_MOMENT,
    ParameterType.STRESS: UnitType.UT_STRESS,
    ParameterType.UNIT_WEIGHT: UnitType.UT_UNIT_WEIGHT,
    ParameterType.THERMAL_EXPANSION: UnitType.UT_THERMAL_EXPANSION,
    ParameterType.HVAC_DENSITY: UnitType.UT_HVAC_DENSITY,
    ParameterType.HVAC_ENERGY: UnitType.UT_HVAC_ENERGY,
    ParameterType.HVAC_FRICTION: UnitType.UT_HVAC_FRICTION,
    ParameterType.HVAC_POWER: UnitType.UT_HVAC_POWER,
    ParameterType.HVAC_POWER_DENSITY: UnitType.UT_HVAC_POWER_DENSITY,
    ParameterType.HVAC_PRESSURE: UnitType.UT_HVAC_PRESSURE,
    ParameterType.HVAC_TEMPERATURE: UnitType.UT_HVAC_TEMPERATURE,
    ParameterType.HVAC_VELOCITY: UnitType.UT_HVAC_VELOCITY,
    ParameterType.HVAC_AIR_FLOW: UnitType.UT_HVAC_AIRFLOW,
    ParameterType.HVAC_DUCT_SIZE: UnitType.UT_HVAC_DUCT_SIZE,
    ParameterType.HVAC_CROSS_SECTION: UnitType.UT_HVAC_CROSS_SECTION,
    ParameterType.HVAC_HEAT_GAIN: UnitType.UT_HVAC_HEAT_GAIN,
    ParameterType.HVAC_ROUGHNESS: UnitType.UT_HVAC_ROUGHNESS,
    ParameterType.HVAC_VISCOSITY: UnitType.UT_HVAC_VISCOSITY,
    ParameterType.ELECTRICAL_CURRENT: UnitType.UT_ELECTRICAL_CURRENT,
    ParameterType.ELECTRICAL_POTENTIAL: UnitType.UT_ELECTRICAL_POTENTIAL,
    ParameterType.ELECTRICAL_FREQUENCY: UnitType.UT_ELECTRICAL_FREQUENCY,
    ParameterType.ELECTRICAL_ILLUMINANCE: UnitType.UT_ELECTRICAL_ILLUMINANCE,
    ParameterType.ELECTRICAL_LUMINOUS_FLUX: (
        UnitType.UT_ELECTRICAL_LUMINOUS_FLUX
        ),
    ParameterType.ELECTRICAL_POWER: UnitType.UT_ELECTRICAL_POWER,
    ParameterType.ELECTRICAL_APPARENT_POWER: (
        UnitType.UT_ELECTRICAL_APPARENT_POWER
        ),
    ParameterType.ELECTRICAL_POWER_DENSITY: (
        UnitType.UT_ELECTRICAL_POWER_DENSITY
        ),
    ParameterType.PIPING_DENSITY: UnitType.UT_PIPING_DENSITY,
    ParameterType.PIPING_FLOW: UnitType.UT_PIPING_FLOW,
    ParameterType.PIPING_FRICTION: UnitType.UT_PIPING_FRICTION,
    ParameterType.PIPING_PRESSURE: UnitType.UT_PIPING_PRESSURE,
    ParameterType.PIPING_TEMPERATURE: UnitType.UT_PIPING_TEMPERATURE,
    ParameterType.PIPING_VELOCITY: UnitType.UT_PIPING_VELOCITY,
    ParameterType.PIPING_VISCOSITY: UnitType.UT_PIPING_VISCOSITY,
    ParameterType.PIPING_ROUGHNESS: UnitType.UT_PIPING_ROUGHNESS,
    ParameterType.PIPING_VOLUME: UnitType.UT_PIPING_VOLUME,
    ParameterType.PIPE_SIZE: UnitType.UT_PIPE_SIZE,
    })


def get_unit_type(parameter_type, table=UNIT_TYPES):
    """Return the UnitType of `parameter_type`.

    Parameters
    ----------
    parameter_type : ParameterType
        The data type whose unit is requested.
    table : Mapping, optional
        The {ParameterType: UnitType} table to look into.
        Default is UNIT_TYPES.

    Returns
    -------
    unit_type : UnitType
        The unit type associated with `parameter_type`, or
        UnitType.UT_UNDEFINED if `table` has no entry for it.
    """
    return table.get(parameter_type, UnitType.UT_UNDEFINED)
