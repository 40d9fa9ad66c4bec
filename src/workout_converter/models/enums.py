"""Enumerations and fixed constants for the workout converter.

String-valued enums render straight into the destination formats, so each
member's value is the exact token the destination expects.
"""

from __future__ import annotations

from enum import Enum


class IntensityClass(str, Enum):
    """Canonical step intensity, reduced from the source platform's classes."""

    WARMUP = "warmup"
    ACTIVE = "active"
    REST = "rest"
    COOLDOWN = "cooldown"


class TimeUnit(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"


class DistanceUnit(str, Enum):
    METERS = "meters"
    KILOMETERS = "kilometers"
    YARDS = "yards"
    MILES = "miles"


class TargetKind(str, Enum):
    """Closed set of line-script target kinds."""

    POWER_PERCENT_FTP = "power_percent_ftp"
    POWER_WATTS = "power_watts"
    HR_PERCENT_MAX = "hr_percent_max"
    HR_PERCENT_LTHR = "hr_percent_lthr"
    PACE_PERCENT_THRESHOLD = "pace_percent_threshold"
    PACE_ABSOLUTE = "pace_absolute"
    ZONE = "zone"
    CADENCE_RPM = "cadence_rpm"
    FREE_TEXT = "free_text"


class ZoneMetric(str, Enum):
    POWER = "power"
    HEART_RATE = "heart_rate"
    PACE = "pace"


class TargetMode(str, Enum):
    """How a step's target evolves over the step."""

    STEADY = "steady"
    RAMP = "ramp"


class PaceDenominator(str, Enum):
    """Denominator units accepted by absolute pace targets."""

    KM = "km"
    MI = "mi"
    M100 = "100m"
    Y100 = "100y"
    M250 = "250m"
    M400 = "400m"
    M500 = "500m"


class PromptPriority(str, Enum):
    NORMAL = "normal"
    ALERT = "alert"


class SportHint(str, Enum):
    """Sport names understood by the line-script destination."""

    RIDE = "Ride"
    RUN = "Run"
    SWIM = "Swim"
    WEIGHT_TRAINING = "WeightTraining"
    WALK = "Walk"
    ROWING = "Rowing"
    NORDIC_SKI = "NordicSki"
    OTHER = "Other"


# ---------------------------------------------------------------------------
# Nested-block destination vocabulary
# ---------------------------------------------------------------------------


class SportType(str, Enum):
    CYCLING = "cycling"
    RUNNING = "running"
    SWIMMING = "swimming"
    STRENGTH = "strength"


class WorkoutType(str, Enum):
    """Workout type tiers, ordered from hardest to easiest."""

    VO2MAX = "vo2max"
    THRESHOLD = "threshold"
    TEMPO = "tempo"
    ENDURANCE = "endurance"
    RECOVERY = "recovery"
    ANAEROBIC = "anaerobic"
    SWEET_SPOT = "sweet_spot"
    MIXED = "mixed"


class WorkoutIntensity(str, Enum):
    VERY_EASY = "very_easy"
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"
    VERY_HARD = "very_hard"


class TrainingPhase(str, Enum):
    FOUNDATION = "Foundation"
    BASE = "Base"
    BUILD = "Build"
    PEAK = "Peak"
    TAPER = "Taper"
    RECOVERY = "Recovery"


class StepIntensity(str, Enum):
    """Step intensity classes as spelled by the nested-block destination."""

    ACTIVE = "active"
    WARM_UP = "warmUp"
    REST = "rest"
    COOL_DOWN = "coolDown"
    RECOVERY = "recovery"


class BlockType(str, Enum):
    STEP = "step"
    REPETITION = "repetition"


class LengthUnit(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    METER = "meter"
    KILOMETER = "kilometer"
    MILE = "mile"
    REPETITION = "repetition"


class NestedTargetType(str, Enum):
    POWER = "power"
    HEART_RATE = "heartRate"
    CADENCE = "cadence"
    PACE = "pace"
    SPEED = "speed"
    STROKE_RATE = "strokeRate"
    RESISTANCE = "resistance"


class NestedTargetUnit(str, Enum):
    PERCENT_OF_FTP = "percentOfFtp"
    WATTS = "watts"
    BPM = "bpm"
    PERCENT_OF_MAX_HR = "percentOfMaxHr"
    PERCENT_OF_THRESHOLD_HR = "percentOfThresholdHr"
    RPM = "rpm"
    ROUND_OR_STRIDE_PER_MINUTE = "roundOrStridePerMinute"
    SECONDS_PER_KILOMETER = "secondsPerKilometer"
    SECONDS_PER_MILE = "secondsPerMile"
    SECONDS_PER_100_METERS = "secondsPer100Meters"
    SECONDS_PER_100_YARDS = "secondsPer100Yards"
    KILOMETERS_PER_HOUR = "kilometersPerHour"
    MILES_PER_HOUR = "milesPerHour"


class PrimaryIntensityMetric(str, Enum):
    """Primary intensity metric as spelled by the nested-block destination."""

    PERCENT_OF_FTP = "percentOfFtp"
    WATTS = "watts"
    HEART_RATE = "heartRate"
    PERCENT_OF_THRESHOLD_PACE = "percentOfThresholdPace"
    PACE = "pace"
    SPEED = "speed"
    RESISTANCE = "resistance"


class PrimaryLengthMetric(str, Enum):
    DURATION = "duration"
    DISTANCE = "distance"


# ---------------------------------------------------------------------------
# Rendering constants
# ---------------------------------------------------------------------------

# Separates the workout script from narrative notes in a description.
SCRIPT_DELIMITER = "- - - -"

# Returned when a workout has neither a script nor any narrative.
EMPTY_DESCRIPTION_PLACEHOLDER = "Workout from TrainingPeaks"

COACH_NOTES_HEADING = "Coach Notes:"
PRE_WORKOUT_COMMENTS_HEADING = "Pre workout comments:"

# ---------------------------------------------------------------------------
# Intensity-factor breakpoints, highest first
# ---------------------------------------------------------------------------

IF_VERY_HARD = 1.05
IF_HARD = 0.95
IF_MODERATE = 0.85
IF_EASY = 0.70
