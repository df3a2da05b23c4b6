import numpy as np
import pytest

from geogebra_ir.expr import (
    Conic,
    Expression,
    Line,
    List,
    Numeric,
    Point,
    Ray,
    Segment,
    Var,
    as_handle,
)
from geogebra_ir.raw import ElementType, LineStyle, LineType, ObjColor
from geogebra_ir.style import BOUND_STYLE, CURVE_STYLE, DEFAULT_STYLE, FREE_STYLE, LINE_STYLE


def test_numeric_literal_uses_positional_complex_form():
    assert Numeric.of(1.0).text == '1 + 0i'
    assert Numeric.of(2.5).text == '2.5 + 0i'
    assert Numeric.of(3).text == '3 + 0i'
    assert Numeric.of(1e-7).text == '0.0000001 + 0i'
    assert Numeric.of(np.float64(-0.5)).text == '-0.5 + 0i'


def test_bool_is_not_a_numeric_literal():
    with pytest.raises(TypeError):
        Numeric.of(True)


def test_arithmetic_templates():
    a = Numeric.of(1.0)
    b = Numeric.of(2.0)

    assert (a + b).text == '(1 + 0i) + (2 + 0i)'
    assert (a - b).text == '(1 + 0i) - (2 + 0i)'
    assert (a * b).text == '(1 + 0i) * (2 + 0i)'
    assert (a / b).text == '(1 + 0i) / (2 + 0i)'
    assert (a % b).text == 'Mod(1 + 0i, 2 + 0i)'
    assert (-a).text == '-(1 + 0i)'
    assert (a ** 2).text == '(1 + 0i)^(2 + 0i)'
    assert a.pow(b).text == '(1 + 0i)^(2 + 0i)'


def test_reflected_operators_keep_operand_order():
    n = Numeric(Expression.expr('t'))

    assert (1 + n).text == '(1 + 0i) + (t)'
    assert (1 - n).text == '(1 + 0i) - (t)'
    assert (2 * n).text == '(2 + 0i) * (t)'
    assert (1 / n).text == '(1 + 0i) / (t)'
    assert (5 % n).text == 'Mod(5 + 0i, t)'
    assert (2 ** n).text == '(2 + 0i)^(t)'


def test_operations_do_not_mutate_operands():
    a = Numeric.of(1.0)
    original = a
    a += 2.0

    assert original.text == '1 + 0i'
    assert a.text == '(1 + 0i) + (2 + 0i)'
    assert a is not original


def test_composed_sum_is_not_equal_to_literal():
    total = Numeric.of(1.0) + Numeric.of(2.0)

    assert total.text == '(1 + 0i) + (2 + 0i)'
    assert not total == Numeric.of(3.0)
    assert not total == Numeric(Expression.expr('3'))


def test_numeric_equality_is_textual_then_literal():
    assert Numeric(Expression.expr('3')) == Numeric(Expression.expr('3.0'))
    assert Numeric(Expression.expr('x(A)')) == Numeric(Expression.expr('x(A)'))
    assert Numeric(Expression.expr('2+3')) != Numeric(Expression.expr('5'))
    assert Numeric.of(2.0) == 2.0
    assert 2.0 == Numeric.of(2.0)
    assert Numeric.of(1.0) != Point.of((0, 0))


def test_numeric_is_unhashable():
    with pytest.raises(TypeError):
        hash(Numeric.zero())


def test_is_const_requires_single_literal():
    assert Numeric(Expression.expr('2.5')).is_const()
    assert Numeric(Expression.expr('-3')).is_const()
    assert not Numeric(Expression.expr('2+3')).is_const()
    assert not Numeric(Expression.expr(' 2')).is_const()
    assert not Numeric.of(2.0).is_const()


def test_identities_are_syntactic():
    assert Numeric.zero().text == '0'
    assert Numeric.one().text == '1'
    assert Numeric.zero().is_zero()
    assert Numeric(Expression.expr('0.0')).is_zero()
    assert not Numeric.of(0.0).is_zero()
    assert Numeric.one().is_one()
    assert not (Numeric.one() * 1).is_one()


def test_folds():
    assert Numeric.fold_sum([]).text == '0'
    assert Numeric.fold_product([]).text == '1'
    assert Numeric.fold_sum([1.0]).text == '1 + 0i'
    assert Numeric.fold_sum([1.0, 2.0, 3.0]).text == '((1 + 0i) + (2 + 0i)) + (3 + 0i)'
    assert Numeric.fold_product([2.0, 3.0]).text == '(2 + 0i) * (3 + 0i)'


def test_numeric_functions():
    a = Var('elem0', ElementType.POINT)
    b = Var('elem1', ElementType.POINT)
    c = Var('elem2', ElementType.POINT)
    k = Var('elem3', ElementType.LINE)
    l = Var('elem4', ElementType.LINE)

    assert Numeric.angle(a, b, c).text == 'Angle(elem0, elem1, elem2)'
    assert Numeric.angle_lines(k, l).text == 'Angle(elem3, elem4)'
    assert Numeric.atan2(1.0, 2.0).text == 'atan2(1 + 0i, 2 + 0i)'
    assert Numeric.complex(1.0, 2.0).text == '(1 + 0i) + (2 + 0i)i'
    assert Numeric.distance(a, k).text == 'Distance(elem0, elem3)'
    n = Numeric(Expression.expr('z'))
    assert n.real().text == 'real(z)'
    assert n.imaginary().text == 'imaginary(z)'
    assert n.arg().text == 'arg(z)'


def test_distance_rejects_non_objects():
    with pytest.raises(TypeError):
        Numeric.distance((0, 0), Numeric.of(1.0))


def test_point_from_tuple():
    p = Point.of((1.0, 2))

    assert p.text == '(real(1 + 0i), real(2 + 0i))'
    assert p.style == DEFAULT_STYLE
    assert p.kind is ElementType.POINT


def test_point_accessors():
    p = Point(Expression.expr('A'))

    assert p.x().text == 'x(A)'
    assert p.y().text == 'y(A)'
    assert p.complex().text == 'ToComplex(A)'


def test_intersection_uses_bound_style():
    a, b, c, d = ((0, 0), (1, 0), (0, 1), (1, 1))
    p = Point.intersect(Line.through(a, b), Line.through(c, d))

    assert p.text.startswith('Intersect(Line(')
    assert p.style == BOUND_STYLE
    assert p.style.color == ObjColor(97, 97, 97)
    assert p.style.display_label


def test_point_on_uses_free_style():
    circle = Conic.circle((0, 0), 1.0)
    p = Point.on(circle)

    assert p.text == 'Point(Circle((real(0 + 0i), real(0 + 0i)), abs(1 + 0i)))'
    assert p.style == FREE_STYLE
    assert p.style.color == ObjColor(21, 101, 192)


def test_point_on_rejects_lists():
    with pytest.raises(TypeError):
        Point.on(List.from_items([1.0]))


def test_conic_center_is_bound():
    center = Conic(Expression.expr('c')).center()

    assert center.text == 'Center(c)'
    assert center.style == BOUND_STYLE


def test_line_constructors_share_default_style():
    a = Var('A', ElementType.POINT)
    b = Var('B', ElementType.POINT)
    c = Var('C', ElementType.POINT)
    k = Var('k', ElementType.LINE)

    lines = {
        'Line(A, B)': Line.through(a, b),
        'AngleBisector(A, B, C)': Line.angle_bisector(a, b, c),
        'PerpendicularLine(C, k)': Line.perpendicular(k, c),
        'Line(C, k)': Line.parallel(k, c),
    }
    for text, line in lines.items():
        assert line.text == text
        assert line.style == LINE_STYLE
        assert line.style.line_style == LineStyle()
        assert not line.style.display_label


def test_segment_ray_and_conic_hide_label():
    a = Var('A', ElementType.POINT)
    b = Var('B', ElementType.POINT)

    segment = Segment.between(a, b)
    ray = Ray.from_origin(a, b)
    circle = Conic.circle(a, 2.0)

    assert segment.text == 'Segment(A, B)'
    assert ray.text == 'Ray(A, B)'
    assert circle.text == 'Circle(A, abs(2 + 0i))'
    for handle in (segment, ray, circle):
        assert handle.style == CURVE_STYLE


def test_style_setters_replace_style():
    line = Line.through((0, 0), (1, 1))
    before = line.expression

    line.set_color(1, 2, 3)
    line.set_style(LineStyle(thickness=7, type=LineType.DASHED_LONG))
    line.set_display_label(True)

    assert before.style == LINE_STYLE
    assert line.style.color == ObjColor(1, 2, 3)
    assert line.style.line_style == LineStyle(thickness=7, type=LineType.DASHED_LONG)
    assert line.style.display_label
    assert line.text == before.text


def test_set_color_rejects_out_of_range_channels():
    with pytest.raises(ValueError):
        Point.of((0, 0)).set_color(256, 0, 0)


def test_points_have_no_line_style_setter():
    assert not hasattr(Point.of((0, 0)), 'set_style')


def test_var_contributes_only_its_label():
    var = Var('elem7', ElementType.POINT)

    line = Line.through(var, var)

    assert line.text == 'Line(elem7, elem7)'
    assert var.text == 'elem7'


def test_var_kind_mismatch_raises():
    with pytest.raises(TypeError):
        Line.of(Var('elem0', ElementType.POINT))


def test_var_delegates_to_handle():
    point = Var('P', ElementType.POINT)
    circle = Var('c', ElementType.CONIC)
    values = Var('l', ElementType.LIST, ElementType.NUMERIC)

    assert point.x().text == 'x(P)'
    assert circle.center().text == 'Center(c)'
    assert values.sum().text == 'Sum(Append(l, 0 + 0i))'
    with pytest.raises(AttributeError):
        point.missing_method()


def test_list_literals():
    assert List.from_items([]).text == '{}'
    assert List.from_items([1.0]).text == '{1 + 0i}'
    assert List.from_items([1.0, 2.0]).text == '{1 + 0i, 2 + 0i}'
    assert List.from_items([]).item_kind is None
    assert List.from_items([(0, 1)]).item_kind is ElementType.POINT


def test_list_rejects_mixed_items():
    with pytest.raises(TypeError):
        List.from_items([1.0, (0, 0)])


def test_list_operations():
    points = List.of([Var('A', ElementType.POINT), Var('B', ElementType.POINT)])
    numbers = List.of([1.0, 2.0])

    assert points.mean_x().text == 'MeanX({A, B})'
    assert points.mean_y().text == 'MeanY({A, B})'
    assert numbers.sum().text == 'Sum(Append({1 + 0i, 2 + 0i}, 0 + 0i))'
    assert numbers.product().text == 'Product(Append({1 + 0i, 2 + 0i}, 1 + 0i))'
    with pytest.raises(TypeError):
        numbers.mean_x()
    with pytest.raises(TypeError):
        points.sum()


def test_list_of_rejects_strings():
    with pytest.raises(TypeError):
        List.of('abc')


def test_as_handle_dispatch():
    assert isinstance(as_handle(1.0), Numeric)
    assert isinstance(as_handle((0, 0)), Point)
    assert isinstance(as_handle(Var('s', ElementType.SEGMENT)), Segment)
    with pytest.raises(TypeError):
        as_handle('Line(A, B)')


def test_var_does_not_forward_style_setters():
    point = Var('A', ElementType.POINT)
    line = Var('k', ElementType.LINE)

    with pytest.raises(AttributeError):
        point.set_color(255, 0, 0)
    with pytest.raises(AttributeError):
        point.set_display_label(False)
    with pytest.raises(AttributeError):
        line.set_style(LineStyle(thickness=3))


def test_huge_integer_literal_raises_value_error():
    with pytest.raises(ValueError, match='out of floating-point range'):
        Numeric.of(10 ** 400)


def test_points_convert_only_from_tuples():
    assert Point.of((0, 1)).text == '(real(0 + 0i), real(1 + 0i))'
    with pytest.raises(TypeError):
        Point.of([0, 1])
    with pytest.raises(TypeError):
        as_handle([0, 1])
