from formattable_widget import SimpleFormattedTable, WidgetTemplateRenderer, as_htmlwidget
from formattable_widget.utils.logging import setup_logging


def build_table() -> SimpleFormattedTable:
    return SimpleFormattedTable.from_records(
        [
            {"model": "Mazda RX4", "mpg": 21.0, "cyl": 6},
            {"model": "Datsun 710", "mpg": 22.8, "cyl": 4},
            {"model": "Hornet Sportabout", "mpg": 18.7, "cyl": 8},
        ],
        formatters={
            "mpg": lambda v: (
                f'<span style="display: block; color: white; '
                f'background-color: rgb({int(255 * v / 22.8)}, 0, 0)">{v}</span>'
            ),
        },
        caption="mtcars (the higher the mpg, the redder)",
    )


if __name__ == "__main__":
    setup_logging("DEBUG")
    widget = as_htmlwidget(build_table(), width="50%")
    print(WidgetTemplateRenderer().render_page(widget))
