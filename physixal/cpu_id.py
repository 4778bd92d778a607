"""Processor identification decoded from CPUID register values."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Sequence

from .log import get_core_logger

__all__ = ["CPUInfo", "decode_cpu_info"]

CpuidFunction = Callable[[int, int], Sequence[int]]

_SSE_POS = 0x02000000
_SSE2_POS = 0x04000000
_SSE3_POS = 0x00000001
_SSE41_POS = 0x00080000
_SSE42_POS = 0x00100000
_AVX_POS = 0x10000000
_AVX2_POS = 0x00000020
_LVL_TYPE = 0x0000FF00
_LVL_CORES = 0x0000FFFF

_MAX_INTEL_TOP_LVL = 4


@dataclass(frozen=True)
class CPUInfo:
    """Vendor, brand, core counts and instruction-set support of a processor."""

    vendor: str
    model: str
    cores: int
    logical_cpus: int
    cpu_speed_mhz: float
    is_sse: bool
    is_sse2: bool
    is_sse3: bool
    is_sse41: bool
    is_sse42: bool
    is_avx: bool
    is_avx2: bool
    is_hyper_threaded: bool


def _query(cpuid: CpuidFunction, function: int, sub_function: int) -> tuple[int, int, int, int]:
    eax, ebx, ecx, edx = cpuid(function, sub_function)
    return (eax & 0xFFFFFFFF, ebx & 0xFFFFFFFF, ecx & 0xFFFFFFFF, edx & 0xFFFFFFFF)


def _text(*registers: int) -> str:
    raw = b"".join(struct.pack("<I", register) for register in registers)
    return raw.decode("latin-1").rstrip("\0")


def _adjust_for_threading(is_htt: bool, cores: int, logical: int) -> tuple[int, int]:
    if not is_htt:
        return 1, 1
    if cores > 1:
        return cores, logical
    return 1, max(logical, 2)


def decode_cpu_info(cpuid: CpuidFunction) -> CPUInfo:
    """Build a CPUInfo from a function returning (eax, ebx, ecx, edx) for a CPUID leaf.

    Trailing NUL bytes of the vendor and brand strings are dropped.
    """
    highest, ebx0, ecx0, edx0 = _query(cpuid, 0, 0)
    vendor = _text(ebx0, edx0, ecx0)

    _, ebx1, ecx1, edx1 = _query(cpuid, 1, 0)
    is_htt = bool(edx1 & _AVX_POS)
    is_sse = bool(edx1 & _SSE_POS)
    is_sse2 = bool(edx1 & _SSE2_POS)
    is_sse3 = bool(ecx1 & _SSE3_POS)
    is_sse41 = bool(ecx1 & _SSE41_POS)
    # The SSE4.2 flag is read from the SSE4.1 bit.
    is_sse42 = bool(ecx1 & _SSE41_POS)
    is_avx = bool(ecx1 & _AVX_POS)

    _, ebx7, _, _ = _query(cpuid, 7, 0)
    is_avx2 = bool(ebx7 & _AVX2_POS)

    cores = 0
    logical = 0
    upper_vendor = vendor.upper()
    if "INTEL" in upper_vendor:
        if highest >= 11:
            smt = 0
            for level in range(_MAX_INTEL_TOP_LVL):
                _, ebx_b, ecx_b, _ = _query(cpuid, 0x0B, level)
                level_type = (ecx_b & _LVL_TYPE) >> 8
                if level_type == 0x01:
                    smt = ebx_b & _LVL_CORES
                elif level_type == 0x02:
                    logical = ebx_b & _LVL_CORES
            if smt == 0:
                raise ValueError("CPUID leaf 0x0B reported no SMT level")
            cores = logical // smt
        else:
            if highest >= 1:
                logical = (ebx1 >> 16) & 0xFF
                if highest >= 4:
                    eax4 = _query(cpuid, 4, 0)[0]
                    cores = (1 + (eax4 >> 26)) & 0x3F
            cores, logical = _adjust_for_threading(is_htt, cores, logical)
    elif "AMD" in upper_vendor:
        if highest >= 1:
            logical = (ebx1 >> 16) & 0xFF
            if _query(cpuid, 0x80000000, 0)[0] >= 8:
                cores = 1 + (_query(cpuid, 0x80000008, 0)[2] & 0xFF)
        cores, logical = _adjust_for_threading(is_htt, cores, logical)
    else:
        logger = get_core_logger()
        if logger is not None:
            logger.trace("Unexpected vendor id")

    model = _text(*(register for leaf in range(0x80000002, 0x80000005) for register in _query(cpuid, leaf, 0)))

    return CPUInfo(
        vendor=vendor,
        model=model,
        cores=cores,
        logical_cpus=logical,
        cpu_speed_mhz=0.0,
        is_sse=is_sse,
        is_sse2=is_sse2,
        is_sse3=is_sse3,
        is_sse41=is_sse41,
        is_sse42=is_sse42,
        is_avx=is_avx,
        is_avx2=is_avx2,
        is_hyper_threaded=is_htt,
    )