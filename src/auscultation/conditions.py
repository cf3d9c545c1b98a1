"""Auscultation condition definitions and their fixed synthesis parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class SoundCategory(Enum):
    """Synthesizer family a condition is rendered with."""

    HEART = "Heart Sound Simulation"
    FETAL = "Fetal Heart Sounds"
    LUNG = "Lung Sound Simulation"


class Condition(Enum):
    """Clinical conditions keyed by their public identifier."""

    # Adult heart
    NORMAL_HEART = "normal_heart"
    VALVE_DISEASE = "valve_disease"
    PERICARDIAL_DISEASE = "pericardial_disease"
    CONGENITAL_DISEASE = "congenital_disease"
    HEART_FAILURE = "heart_failure"
    ARRHYTHMIA = "arrhythmia"

    # Fetal heart
    FHS_NORMAL = "fhs_normal"
    FHS_ARRHYTHMIA = "fhs_arrhythmia"
    FHS_MOVE_STRONG = "fhs_move_strong"
    FHS_MOVE_WEAK = "fhs_move_weak"
    FHS_UC_FAST = "fhs_uc_fast"
    FHS_UC_SLOW = "fhs_uc_slow"

    # Lung
    NORMAL_LUNG = "normal_lung"
    COARSE_CRACKLES = "coarse_crackles"
    FINE_CRACKLES = "fine_crackles"
    WHEEZES = "wheezes"


@dataclass(frozen=True)
class HeartSoundConfig:
    """Parameters for adult cardiac sound synthesis.

    Attributes:
        fs: internal sampling rate in Hz.
        hr: heart rate in BPM.
        awgn_amplitude: scale of the global white Gaussian noise.
        rr_std_frac: RR jitter as a fraction of the mean RR interval.
        systolic_murmur: noise between S1 and S2.
        diastolic_murmur: noise between S2 and the next beat.
        continuous_murmur: noise across the whole beat.
        friction: pericardial friction bursts.
        gallop: extra S3/S4 pulses.
    """

    fs: float = 1000.0
    hr: float = 75.0
    awgn_amplitude: float = 0.06
    rr_std_frac: float = 0.05
    systolic_murmur: bool = False
    diastolic_murmur: bool = False
    continuous_murmur: bool = False
    friction: bool = False
    gallop: bool = False


@dataclass(frozen=True)
class FetalSoundConfig:
    """Parameters for fetal phonocardiogram synthesis.

    Attributes:
        fs: internal sampling rate in Hz.
        hr: fetal heart rate in BPM.
        rr_std_frac: RR jitter as a fraction of the mean RR interval.
        awgn_amplitude: scale of the global white Gaussian noise.
        maternal_enabled: mix in an attenuated maternal heart sound.
        maternal_hr: maternal heart rate in BPM.
        maternal_amplitude: gain applied to the band-passed maternal component.
        movement_enabled: inject fetal movement bursts.
        movement_intensity: movement gain, also scales the burst rate.
        movement_rate_per_min: base movement bursts per minute.
        uc_enabled: inject uterine contraction envelopes.
        uc_rate_per_10min: contractions per ten minutes.
        uc_duration_range: (min, max) contraction duration in seconds.
    """

    fs: float = 2000.0
    hr: float = 140.0
    rr_std_frac: float = 0.05
    awgn_amplitude: float = 0.03
    maternal_enabled: bool = True
    maternal_hr: float = 75.0
    maternal_amplitude: float = 0.3
    movement_enabled: bool = False
    movement_intensity: float = 1.0
    movement_rate_per_min: float = 6.0
    uc_enabled: bool = False
    uc_rate_per_10min: float = 3.0
    uc_duration_range: tuple[float, float] = (30.0, 60.0)


@dataclass(frozen=True)
class CrackleConfig:
    """Discrete crackle bursts laid over a breath sound.

    Attributes:
        per_cycle: crackles per respiratory cycle.
        phase_range: (start, end) position inside the cycle as a fraction.
        burst_fraction: burst length as a fraction of the cycle length.
        min_burst_samples: floor on the burst length.
        oscillations: sinusoid periods inside one burst.
        decay: exponential decay rate across the burst.
        amplitude: peak burst amplitude.
    """

    per_cycle: int
    phase_range: tuple[float, float]
    burst_fraction: float
    min_burst_samples: int
    oscillations: float
    decay: float
    amplitude: float


@dataclass(frozen=True)
class WheezeConfig:
    """Sustained narrow-band tone, strongest during expiration."""

    harmonic: float = 12.0
    amplitude: float = 0.6
    inspiration_weight: float = 0.35


@dataclass(frozen=True)
class LungSoundConfig:
    """Parameters for additive respiratory sound synthesis.

    Attributes:
        breath_rate: breaths per minute; only sets the time axis.
        oscillations_per_cycle: base oscillation periods per breath.
        overtones: integer multiples of the base oscillation added at half gain.
        jitter: phase jitter of the base oscillation.
        noise_amplitude: uniform background noise amplitude.
        inspiration_fraction: share of each cycle spent in inspiration.
        expiration_gain: envelope peak during expiration.
        crackles: optional crackle bursts.
        wheeze: optional wheeze tone.
    """

    breath_rate: float = 15.0
    oscillations_per_cycle: float = 8.0
    overtones: tuple[int, ...] = (2, 3)
    jitter: float = 0.01
    noise_amplitude: float = 0.05
    inspiration_fraction: float = 0.4
    expiration_gain: float = 0.6
    crackles: Optional[CrackleConfig] = None
    wheeze: Optional[WheezeConfig] = None


COARSE_CRACKLES = CrackleConfig(
    per_cycle=3,
    phase_range=(0.02, 0.25),
    burst_fraction=0.04,
    min_burst_samples=6,
    oscillations=2.0,
    decay=3.0,
    amplitude=0.9,
)

FINE_CRACKLES = CrackleConfig(
    per_cycle=6,
    phase_range=(0.2, 0.4),
    burst_fraction=0.012,
    min_burst_samples=3,
    oscillations=3.5,
    decay=5.0,
    amplitude=0.6,
)

NORMAL_LUNG = LungSoundConfig()
COARSE_CRACKLES_LUNG = LungSoundConfig(crackles=COARSE_CRACKLES)
FINE_CRACKLES_LUNG = LungSoundConfig(crackles=FINE_CRACKLES)
WHEEZE_LUNG = LungSoundConfig(wheeze=WheezeConfig())


SimulationParameters = Union[HeartSoundConfig, FetalSoundConfig, LungSoundConfig]


@dataclass(frozen=True)
class ConditionProfile:
    """Catalogue entry: display metadata plus the fixed synthesis parameters."""

    name: str
    description: str
    category: SoundCategory
    params: SimulationParameters


CONDITION_REGISTRY: dict[Condition, ConditionProfile] = {
    # --- Adult heart ---
    Condition.NORMAL_HEART: ConditionProfile(
        name="Normal Heart Sounds",
        description="Standard human cardiac audio",
        category=SoundCategory.HEART,
        params=HeartSoundConfig(hr=75.0, rr_std_frac=0.03, awgn_amplitude=0.05),
    ),
    Condition.VALVE_DISEASE: ConditionProfile(
        name="Valve Disease",
        description="Murmur timing, frequency, envelope shape",
        category=SoundCategory.HEART,
        params=HeartSoundConfig(hr=75.0, systolic_murmur=True, awgn_amplitude=0.05),
    ),
    Condition.PERICARDIAL_DISEASE: ConditionProfile(
        name="Pericardial Disease",
        description="High-frequency friction or short sounds",
        category=SoundCategory.HEART,
        params=HeartSoundConfig(hr=75.0, friction=True, awgn_amplitude=0.05),
    ),
    Condition.CONGENITAL_DISEASE: ConditionProfile(
        name="Congenital Disease",
        description="Special splitting patterns, continuous murmurs",
        category=SoundCategory.HEART,
        params=HeartSoundConfig(hr=80.0, continuous_murmur=True, awgn_amplitude=0.05),
    ),
    Condition.HEART_FAILURE: ConditionProfile(
        name="Heart Failure/Cardiomyopathy",
        description="S3/S4 gallop rhythm patterns",
        category=SoundCategory.HEART,
        params=HeartSoundConfig(hr=65.0, gallop=True, awgn_amplitude=0.05),
    ),
    Condition.ARRHYTHMIA: ConditionProfile(
        name="Arrhythmia",
        description="RR interval and S1 intensity changes",
        category=SoundCategory.HEART,
        params=HeartSoundConfig(hr=75.0, rr_std_frac=0.2, awgn_amplitude=0.05),
    ),
    # --- Fetal heart ---
    Condition.FHS_NORMAL: ConditionProfile(
        name="Normal Fetal Heart Sounds",
        description="Standard fetal cardiac sounds",
        category=SoundCategory.FETAL,
        params=FetalSoundConfig(),
    ),
    Condition.FHS_ARRHYTHMIA: ConditionProfile(
        name="Arrhythmia",
        description="Irregular RR intervals",
        category=SoundCategory.FETAL,
        params=FetalSoundConfig(rr_std_frac=0.15),
    ),
    Condition.FHS_MOVE_STRONG: ConditionProfile(
        name="Strong Movement",
        description="Enhanced movement artifacts",
        category=SoundCategory.FETAL,
        params=FetalSoundConfig(
            movement_enabled=True, movement_intensity=2.0, movement_rate_per_min=12.0,
        ),
    ),
    Condition.FHS_MOVE_WEAK: ConditionProfile(
        name="Weak Movement",
        description="Reduced movement artifacts",
        category=SoundCategory.FETAL,
        params=FetalSoundConfig(
            movement_enabled=True, movement_intensity=0.4, movement_rate_per_min=4.0,
        ),
    ),
    Condition.FHS_UC_FAST: ConditionProfile(
        name="Fast Contractions",
        description="Frequent uterine contractions",
        category=SoundCategory.FETAL,
        params=FetalSoundConfig(
            uc_enabled=True, uc_rate_per_10min=6.0, uc_duration_range=(10.0, 20.0),
        ),
    ),
    Condition.FHS_UC_SLOW: ConditionProfile(
        name="Slow Contractions",
        description="Infrequent/longer contractions",
        category=SoundCategory.FETAL,
        params=FetalSoundConfig(
            uc_enabled=True, uc_rate_per_10min=1.0, uc_duration_range=(20.0, 40.0),
        ),
    ),
    # --- Lung ---
    Condition.NORMAL_LUNG: ConditionProfile(
        name="Normal Lung Sounds",
        description="Standard respiratory audio",
        category=SoundCategory.LUNG,
        params=NORMAL_LUNG,
    ),
    Condition.COARSE_CRACKLES: ConditionProfile(
        name="Coarse Crackles",
        description="Low-pitched wet sounds",
        category=SoundCategory.LUNG,
        params=COARSE_CRACKLES_LUNG,
    ),
    Condition.FINE_CRACKLES: ConditionProfile(
        name="Fine Crackles",
        description="High-pitched crackling sounds",
        category=SoundCategory.LUNG,
        params=FINE_CRACKLES_LUNG,
    ),
    Condition.WHEEZES: ConditionProfile(
        name="Wheezes",
        description="High-pitched whistling sounds",
        category=SoundCategory.LUNG,
        params=WHEEZE_LUNG,
    ),
}


def conditions_by_category() -> dict[SoundCategory, list[Condition]]:
    """Group the catalogue by category, preserving declaration order."""
    grouped: dict[SoundCategory, list[Condition]] = {c: [] for c in SoundCategory}
    for condition, profile in CONDITION_REGISTRY.items():
        grouped[profile.category].append(condition)
    return grouped
