import pytest

from edid_samples import DELL_TIMINGS, SAM_TIMING, dell_s2440l, sam_syncmaster
from pyedid.models.descriptor_models import DetailedTimingDescriptor, ProductName, RangeLimits, SerialNumber
from pyedid.models.edid_models import EDID
from pyedid.models.extension_models import (
    AudioBlock,
    CtaExtensions,
    DataBlockHeader,
    NativeDTDs,
    ShortAudioDescriptor,
    ShortVideoDescriptor,
    SpeakerAllocation,
    VendorSpecific,
    VideoBlock,
)
from pyedid.models.header_models import Display, Header
from pyedid.models.timing_models import DetailedTiming


@pytest.fixture
def sam_edid() -> bytes:
    return sam_syncmaster()


@pytest.fixture
def dell_edid() -> bytes:
    return dell_s2440l()


@pytest.fixture
def sam_expected() -> EDID:
    return EDID(
        header=Header(vendor="SAM", product=596, serial=1146106418, week=27, year=17, version=1, revision=3),
        display=Display(video_input=14, width=47, height=30, gamma=120, features=42),
        descriptors=[
            DetailedTimingDescriptor(timing=DetailedTiming(**SAM_TIMING)),
            RangeLimits(),
            ProductName(text="SyncMaster"),
            SerialNumber(text="HS3P701105"),
        ],
        extensions=None,
    )


@pytest.fixture
def dell_expected() -> EDID:
    video_indices = [16, 5, 4, 3, 2, 7, 22, 1, 20, 31, 18, 19]
    return EDID(
        header=Header(vendor="DEL", product=41099, serial=809851217, week=15, year=23, version=1, revision=3),
        display=Display(video_input=128, width=53, height=30, gamma=120, features=234),
        descriptors=[
            DetailedTimingDescriptor(timing=DetailedTiming(**DELL_TIMINGS[0])),
            SerialNumber(text="67Y4J34A0EYQ"),
            ProductName(text="DELL S2440L"),
            RangeLimits(),
        ],
        extensions=CtaExtensions(
            extension_tag=2,
            reserved=3,
            native_dtds=NativeDTDs(underscan=1, basic_audio=1, ycbcr444=1, ycbcr422=1, native_count=1),
            blocks=[
                VideoBlock(
                    header=DataBlockHeader(type_tag=2, length=12),
                    descriptors=[
                        ShortVideoDescriptor(native=1 if i == 0 else 0, cea861_index=index)
                        for i, index in enumerate(video_indices)
                    ],
                ),
                AudioBlock(
                    header=DataBlockHeader(type_tag=1, length=3),
                    descriptors=[
                        ShortAudioDescriptor(
                            format=1,
                            channels=2,
                            sampling_frequencies=7,
                            extended_format_code=0,
                            format_dependent_value=7,
                        )
                    ],
                ),
                VendorSpecific(header=DataBlockHeader(type_tag=3, length=5), identifier=(3, 12, 0), payload=(16, 0)),
                SpeakerAllocation(header=DataBlockHeader(type_tag=4, length=3), speakers=1, reserved=(0, 0)),
            ],
            timings=[DetailedTiming(**timing) for timing in DELL_TIMINGS],
        ),
    )
