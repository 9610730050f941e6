# recursia

Small building blocks for teaching recursion through pictures and text. It
needs nothing outside the standard library.

## Modules

- `recursia.geometry`: frozen integer `Point`, `Rectangle` and `Vector2D`
  types. `point - point` gives a `Vector2D`, `point + vector` and
  `point - vector` give a `Point`, and a vector can be added, subtracted,
  negated, multiplied by a scalar and divided by one (components are
  truncated to integers).
- `recursia.color`: an immutable 24-bit `Color(red, green, blue)` with
  `red()`, `green()`, `blue()`, `to_rgb()` and `to_html()`, the constructors
  `Color.from_hex`, `Color.from_hsv` and `Color.random`, and presets such as
  `Color.white()`, `Color.black()`, `Color.red_color()` and `Color.gray()`.
  Out-of-range values raise `ValueError`. Colours compare and order by their
  packed RGB value.
- `recursia.font`: the `FontFamily` and `FontStyle` enums and a frozen `Font`
  (default: sans serif, normal, size 13, black) with `with_family`,
  `with_style`, `with_size`, `with_color` and `library_font_string()`, which
  gives a description such as `Serif-ITALIC-24` using the platform's font
  name (`family_name`, `style_name`).
- `recursia.flag`: the recursive Flag of Recursia. `draw_flag_of_recursia`
  takes the bounds and a `draw` callback that receives each triangle's three
  corners and its colour (`CARDINAL` or `SANDSTONE`), and returns how many
  triangles were drawn. `draw_acute_triangle`, `draw_obtuse_triangle`,
  `place_decagon_in` and the xorshift `scramble` are available too.
- `recursia.chisquared`: `is_close(probabilities, experiment)` calls a
  no-argument `experiment` 100,000 times and checks the outcome counts
  against the expected distribution with a chi-squared test at p = 1e-6.
  More than `MAX_OUTCOMES` outcomes, or an outcome out of range, raises
  `ValueError`.
- `recursia.text`: `tokenize`, `reduce_font`, and `TextRender.construct` /
  `LegendRender.construct`, which lay out wrapped text or a bulleted legend
  inside a `Box`, shrinking the font until it fits. A `TextRender` can be
  realigned with `align_left`, `align_center_horizontally`, `align_top`,
  `align_bottom` and `align_center_vertically`. Text is measured with a
  `TextMetrics`, which by default treats every character as a fixed fraction
  of the font size; pass your own for other measurements.
- `recursia.graph`: `LineGraphRender.construct` places the axes and maps lines
  given in the unit square onto the graph area (`label_dimensions_for`,
  `axes_for`), plus `fit_to_bounds`, `mollweide_projection_of`,
  `trim_extension_from` and `list_matching_files`.
- `recursia.console`: `make_selection_from` lists options and prompts until a
  valid index is entered; `make_file_selection` does the same for the files
  in a directory (default `res/`) with a given suffix. Both read and write
  any text streams, standard input and output by default.
- `recursia.color_console`: `ColorConsole`, a writable stream that keeps text
  in styled runs (`ConsoleStyle`, `ConsoleFontStyle`). `set_style` changes the
  style, `with_style` is a context manager that changes it temporarily,
  `render_html()` returns the contents as HTML, and `flush()` stores that
  HTML in `display` and passes it to the optional `on_update` callback.

## What it does not do

The package computes geometry, colours, layouts and HTML, but it does not
open a window or draw anything on screen. The flag, text, legend and graph
functions hand back points, boxes and lines (or call your `draw` callback);
putting them on a canvas is left to whatever graphics library you use. There
is no command-line program.

## Installing

    pip install .

## Example

    from recursia.geometry import Rectangle
    from recursia.flag import draw_flag_of_recursia

    triangles = []
    count = draw_flag_of_recursia(
        Rectangle(0, 0, 500, 300),
        lambda p0, p1, p2, color: triangles.append((p0, p1, p2, color)),
    )
    print(count, len(triangles))

    from recursia.color import Color
    print(Color.from_hsv(0.5, 1, 1).to_html())

## Running the tests

    pip install ".[test]"
    pytest