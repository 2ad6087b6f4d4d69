"""
Bézier curve evaluation of arbitrary order and dimension

This package evaluates Bézier curves (position, slope, degree elevation and
De Casteljau subdivision) through two paths implementing the same mathematics:
the generic NBez evaluator, which works for any order up to MAX_ORDER using a
cached table of binomial coefficients, and fixed-shape types generated for
orders 2-6 in 2D, 3D and 4D with their coefficients stored as class constants.
"""

from .constants import MAX_ORDER, FIXED_ORDERS, FIXED_DIMENSIONS, AXES
from .exceptions import (
    BezierError,
    ChainError,
    InvalidLength,
    BadNodePattern,
    DomainError,
    OrderOverflow
)
from .point import (
    Point,
    Vector,
    Point2d,
    Point3d,
    Point4d,
    Vector2d,
    Vector3d,
    Vector4d,
    make_point,
    make_vector,
    lerp
)
from .cache import (
    combination,
    factorial,
    binomial_row,
    check_order,
    CoefficientCache,
    precompute_coefficients,
    get_cache_info,
    clear_coefficient_cache
)
from .bezier import NBez, get_D_matrix, get_E_matrix
from .de_casteljau import (
    de_casteljau_split_1d,
    de_casteljau_split_matrices,
    segment_matrices_equal_params,
    split_points
)
from .chain import NodeKind, BezNode, BezCubeChain
from .fixed import (
    BezPoly,
    BezComposite,
    field_names,
    poly_type,
    fixed_type,
    BezPoly2o, BezPoly3o, BezPoly4o, BezPoly5o, BezPoly6o,
    Bez2o2d, Bez3o2d, Bez4o2d, Bez5o2d, Bez6o2d,
    Bez2o3d, Bez3o3d, Bez4o3d, Bez5o3d, Bez6o3d,
    Bez2o4d, Bez3o4d, Bez4o4d, Bez5o4d, Bez6o4d
)
from .visualization import (
    sample_curve,
    plot_curve,
    plot_tangents,
    plot_segments,
    plot_chain,
    create_curve_figure
)
from .utils import check_t_bounds, format_number
from . import constants

__all__ = [
    # Core classes
    'NBez',
    'CoefficientCache',

    # Points and vectors
    'Point', 'Vector',
    'Point2d', 'Point3d', 'Point4d',
    'Vector2d', 'Vector3d', 'Vector4d',
    'make_point', 'make_vector', 'lerp',

    # Combinatorics
    'combination',
    'factorial',
    'binomial_row',
    'check_order',
    'precompute_coefficients',
    'get_cache_info',
    'clear_coefficient_cache',

    # Matrix functions
    'get_D_matrix',
    'get_E_matrix',

    # De Casteljau functions
    'de_casteljau_split_1d',
    'de_casteljau_split_matrices',
    'segment_matrices_equal_params',
    'split_points',

    # Cubic chains
    'NodeKind',
    'BezNode',
    'BezCubeChain',

    # Fixed-shape types
    'BezPoly',
    'BezComposite',
    'field_names',
    'poly_type',
    'fixed_type',
    'BezPoly2o', 'BezPoly3o', 'BezPoly4o', 'BezPoly5o', 'BezPoly6o',
    'Bez2o2d', 'Bez3o2d', 'Bez4o2d', 'Bez5o2d', 'Bez6o2d',
    'Bez2o3d', 'Bez3o3d', 'Bez4o3d', 'Bez5o3d', 'Bez6o3d',
    'Bez2o4d', 'Bez3o4d', 'Bez4o4d', 'Bez5o4d', 'Bez6o4d',

    # Visualization functions
    'sample_curve',
    'plot_curve',
    'plot_tangents',
    'plot_segments',
    'plot_chain',
    'create_curve_figure',

    # Errors
    'BezierError',
    'ChainError',
    'InvalidLength',
    'BadNodePattern',
    'DomainError',
    'OrderOverflow',

    # Utility functions
    'check_t_bounds',
    'format_number',

    # Constants
    'MAX_ORDER',
    'FIXED_ORDERS',
    'FIXED_DIMENSIONS',
    'AXES',
    'constants',
]

__version__ = "1.0.0"
