"""Backend-independent GPU resource descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag, auto
from typing import Generic, List, Optional, Tuple, TypeVar

MAX_GPU_VENDOR_STRING_LENGTH = 256


class BufferDomain(IntEnum):
    DEVICE = 0
    LINKED_DEVICE_HOST = 1
    HOST = 2
    CACHED_HOST = 3


class ImageDomain(IntEnum):
    DEVICE = 0
    TRANSIENT = 1
    LINEAR_HOST_CACHED = 2
    LINEAR_HOST = 3


class QueueType(IntEnum):
    UNSUPPORTED = 0
    GRAPHICS = 1
    COMPUTE = 2
    TRANSFER = 3
    COUNT = 4


class ShaderStage(IntEnum):
    NA = 0
    VS = 1
    TCS = 2
    TES = 3
    GS = 4
    FS = 5
    CS = 6
    TS = 7
    MS = 8


class ResourceState(IntFlag):
    UNDEFINED = 0
    GENERAL = 0x00000001
    UNIFORM_BUFFER = 0x00000002
    VERTEX_BUFFER = 0x00000004
    INDEX_BUFFER = 0x00000008
    INDIRECT_ARGUMENT = 0x00000010
    SHADER_RESOURCE = 0x00000020
    UNORDERED_ACCESS = 0x00000040
    RENDER_TARGET = 0x00000080
    DEPTH_STENCIL = 0x00000100
    STREAM_OUT = 0x00000200
    COPY_DEST = 0x00000400
    COPY_SOURCE = 0x00000800
    RESOLVE_DEST = 0x00001000
    RESOLVE_SOURCE = 0x00002000
    PRESENT = 0x00004000
    ACCEL_STRUCT_READ = 0x00008000
    ACCEL_STRUCT_WRITE = 0x00010000


class CompareOp(IntEnum):
    NEVER = 0
    LESS = 1
    EQUAL = 2
    LESS_EQUAL = 3
    GREATER = 4
    NOT_EQUAL = 5
    GREATER_EQUAL = 6
    ALWAYS = 7


class SamplerPreset(IntEnum):
    NEAREST_CLAMP = 0
    LINEAR_CLAMP = 1
    TRILINEAR_CLAMP = 2
    NEAREST_WRAP = 3
    LINEAR_WRAP = 4
    TRILINEAR_WRAP = 5
    NEAREST_SHADOW = 6
    LINEAR_SHADOW = 7
    DEFAULT_GEOMETRY_FILTER_CLAMP = 8
    DEFAULT_GEOMETRY_FILTER_WRAP = 9
    COUNT = 10


class Format(IntEnum):
    UNDEFINED = 0
    R8_UINT = auto()
    R8_SINT = auto()
    R8_UNORM = auto()
    R8_SNORM = auto()
    RG8_UINT = auto()
    RG8_SINT = auto()
    RG8_UNORM = auto()
    RG8_SNORM = auto()
    RGB8_UINT = auto()
    RGB8_SINT = auto()
    RGB8_UNORM = auto()
    RGB8_SNORM = auto()
    R16_UINT = auto()
    R16_SINT = auto()
    R16_UNORM = auto()
    R16_SNORM = auto()
    R16_FLOAT = auto()
    BGRA4_UNORM = auto()
    B5G6R5_UNORM = auto()
    B5G5R5A1_UNORM = auto()
    RGBA8_UINT = auto()
    RGBA8_SINT = auto()
    RGBA8_UNORM = auto()
    RGBA8_SNORM = auto()
    BGRA8_UNORM = auto()
    SRGBA8_UNORM = auto()
    SBGRA8_UNORM = auto()
    R10G10B10A2_UNORM = auto()
    R11G11B10_FLOAT = auto()
    RG16_UINT = auto()
    RG16_SINT = auto()
    RG16_UNORM = auto()
    RG16_SNORM = auto()
    RG16_FLOAT = auto()
    RGB16_UINT = auto()
    RGB16_SINT = auto()
    RGB16_UNORM = auto()
    RGB16_SNORM = auto()
    RGB16_FLOAT = auto()
    R32_UINT = auto()
    R32_SINT = auto()
    R32_FLOAT = auto()
    RGBA16_UINT = auto()
    RGBA16_SINT = auto()
    RGBA16_FLOAT = auto()
    RGBA16_UNORM = auto()
    RGBA16_SNORM = auto()
    RG32_UINT = auto()
    RG32_SINT = auto()
    RG32_FLOAT = auto()
    RGB32_UINT = auto()
    RGB32_SINT = auto()
    RGB32_FLOAT = auto()
    RGBA32_UINT = auto()
    RGBA32_SINT = auto()
    RGBA32_FLOAT = auto()
    D16 = auto()
    D24S8 = auto()
    X24G8_UINT = auto()
    D32 = auto()
    D32S8 = auto()
    X32G8_UINT = auto()
    BC1_UNORM = auto()
    BC1_UNORM_SRGB = auto()
    BC2_UNORM = auto()
    BC2_UNORM_SRGB = auto()
    BC3_UNORM = auto()
    BC3_UNORM_SRGB = auto()
    BC4_UNORM = auto()
    BC4_SNORM = auto()
    BC5_UNORM = auto()
    BC5_SNORM = auto()
    BC6H_UFLOAT = auto()
    BC6H_SFLOAT = auto()
    BC7_UNORM = auto()
    BC7_UNORM_SRGB = auto()
    COUNT = auto()


class WaveOpsSupportFlags(IntFlag):
    NONE = 0x0
    BASIC = 0x00000001
    VOTE = 0x00000002
    ARITHMETIC = 0x00000004
    BALLOT = 0x00000008
    SHUFFLE = 0x00000010
    SHUFFLE_RELATIVE = 0x00000020
    CLUSTERED = 0x00000040
    QUAD = 0x00000080
    PARTITIONED_NV = 0x00000100
    ALL = 0x7FFFFFFF


class IndexType(IntEnum):
    NONE = 0
    UINT16 = 1
    UINT32 = 2


class PrimitiveTopology(IntEnum):
    TRIANGLE_LIST = 0
    TRIANGLE_STRIP = 1


class CullMode(IntEnum):
    NONE = 0
    FRONT = 1
    BACK = 2


class WindingMode(IntEnum):
    CCW = 0
    CW = 1


class PolygonMode(IntEnum):
    FILL = 0
    LINE = 1


class StencilOp(IntEnum):
    KEEP = 0
    ZERO = 1
    REPLACE = 2
    INCREMENT_CLAMP = 3
    DECREMENT_CLAMP = 4
    INVERT = 5
    INCREMENT_WRAP = 6
    DECREMENT_WRAP = 7


class BlendOp(IntEnum):
    ADD = 0
    SUBTRACT = 1
    REVERSE_SUBTRACT = 2
    MIN = 3
    MAX = 4


class BlendFactor(IntEnum):
    ZERO = 0
    ONE = 1
    SRC_COLOR = 2
    ONE_MINUS_SRC_COLOR = 3
    SRC_ALPHA = 4
    ONE_MINUS_SRC_ALPHA = 5
    DST_COLOR = 6
    ONE_MINUS_DST_COLOR = 7
    DST_ALPHA = 8
    ONE_MINUS_DST_ALPHA = 9
    SRC_ALPHA_SATURATED = 10
    BLEND_COLOR = 11
    ONE_MINUS_BLEND_COLOR = 12
    BLEND_ALPHA = 13
    ONE_MINUS_BLEND_ALPHA = 14
    SRC1_COLOR = 15
    ONE_MINUS_SRC1_COLOR = 16
    SRC1_ALPHA = 17
    ONE_MINUS_SRC1_ALPHA = 18


class PipelineType(IntEnum):
    UNDEFINED = 0
    GEOMETRY = 1
    MESH = 2
    COMPUTE = 3
    RAY_TRACING = 4


@dataclass
class Extent2D:
    width: int = 0
    height: int = 0


@dataclass
class Extent3D:
    width: int = 0
    height: int = 0
    depth: int = 0


@dataclass
class MemoryRange:
    offset: int = 0
    size: int = 0


@dataclass
class DebugLabel:
    name: str = ""
    color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.color = tuple(float(c) for c in self.color)
        if len(self.color) != 4:
            raise ValueError("a debug label colour has exactly four components")


@dataclass
class ShaderMacro:
    definition: str
    value: str = ""


@dataclass
class ShaderConstant:
    """A specialization constant: raw bytes bound to a constant index."""

    data: bytes
    index: int

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class DepthState:
    compare_op: CompareOp = CompareOp.NEVER
    enable_write: bool = False


@dataclass
class GPUVendorPreset:
    vendor_id: str = ""
    model_id: str = ""
    revision_id: str = ""
    gpu_name: str = ""
    gpu_driver_version: str = ""
    gpu_driver_date: str = ""
    rt_cores_count: int = 0


@dataclass
class GPUFeature:
    mesh_shading: bool = False
    multi_draw_indirect: bool = False
    tessellation_supported: bool = False
    sampler_anisotropy_supported: bool = False
    ray_tracing: bool = False


@dataclass
class GPUSettings:
    vram: int = 0
    uniform_buffer_alignment: int = 0
    upload_buffer_texture_alignment: int = 0
    upload_buffer_texture_row_alignment: int = 0
    max_vertex_input_bindings: int = 0
    max_root_signature_dwords: int = 0
    wave_lane_count: int = 0
    wave_ops_support_flags: WaveOpsSupportFlags = WaveOpsSupportFlags.NONE
    gpu_vendor_preset: GPUVendorPreset = field(default_factory=GPUVendorPreset)
    feature: GPUFeature = field(default_factory=GPUFeature)


@dataclass
class DrawArguments:
    vertex_count: int
    instance_count: int = 1
    first_vertex: int = 0
    first_instance: int = 0


@dataclass
class DrawIndexArguments:
    index_count: int
    instance_count: int = 1
    first_index: int = 0
    vertex_offset: int = 0
    first_instance: int = 0


@dataclass
class DispatchArguments:
    x: int = 1
    y: int = 1
    z: int = 1


@dataclass
class VertexAttribute:
    location: int = 0
    binding: int = 0
    format: Format = Format.UNDEFINED
    offset: int = 0


@dataclass
class VertexInputBinding:
    stride: int = 0


@dataclass
class VertexInput:
    attributes: List[VertexAttribute] = field(default_factory=list)
    bindings: List[VertexInputBinding] = field(default_factory=list)


@dataclass
class ColorAttachment:
    format: Format = Format.UNDEFINED
    blend_enabled: bool = False
    rgb_blend_op: BlendOp = BlendOp.ADD
    alpha_blend_op: BlendOp = BlendOp.ADD
    src_rgb_blend_factor: BlendFactor = BlendFactor.ONE
    src_alpha_blend_factor: BlendFactor = BlendFactor.ONE
    dst_rgb_blend_factor: BlendFactor = BlendFactor.ZERO
    dst_alpha_blend_factor: BlendFactor = BlendFactor.ZERO


_ALL_BITS_32 = 0xFFFFFFFF


@dataclass
class StencilState:
    stencil_failure_op: StencilOp = StencilOp.KEEP
    depth_failure_op: StencilOp = StencilOp.KEEP
    depth_stencil_pass_op: StencilOp = StencilOp.KEEP
    stencil_compare_op: CompareOp = CompareOp.ALWAYS
    read_mask: int = _ALL_BITS_32
    write_mask: int = _ALL_BITS_32


@dataclass(frozen=True)
class RenderPipelineDynamicState:
    depth_bias_enable: bool = False


H = TypeVar("H")
C = TypeVar("C")


@dataclass
class ResourceHandle(Generic[H, C]):
    """A backend handle paired with the description it was created from."""

    handle: H
    create_info: Optional[C] = None


@dataclass
class UIComponentDesc:
    offset: Tuple[float, float] = (0.0, 150.0)
    size: Tuple[float, float] = (600.0, 550.0)
    font_id: int = 0
    font_size: float = 16.0