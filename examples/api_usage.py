"""
PDF Rasterizer - Library API Usage Examples

This script demonstrates how to use the PDF Rasterizer library programmatically.
"""

from pdf_rasterizer import (
    PDFRasterizer,
    RasterOptions,
    parse_range,
    compute_pixels,
    format_file_size,
    __version__
)


def example_1_basic_conversion():
    """Example 1: Convert a page range to PNG"""
    print("\n=== Example 1: Basic Conversion ===")

    print("Code example:")
    print("""
    with PDFRasterizer('document.pdf') as rasterizer:
        files = rasterizer.convert_pages('1-5')
    print(f"Created {len(files)} files")  # document/document_page_1.png ...
    """)


def example_2_jpeg_output():
    """Example 2: JPEG output at a higher DPI"""
    print("\n=== Example 2: JPEG Output ===")

    print("Code example:")
    print("""
    options = RasterOptions(dpi=300, output_format='jpg', jpeg_quality=90)
    with PDFRasterizer('document.pdf') as rasterizer:
        files = rasterizer.convert_pages('3..4', 'images/', options)
    # images/document_page_3.jpeg, images/document_page_4.jpeg
    """)


def example_3_range_parsing():
    """Example 3: Parse page ranges"""
    print("\n=== Example 3: Range Parsing ===")

    for expression in ('1-5', '2..4'):
        page_range = parse_range(expression)
        print(f"{expression!r} -> {page_range.pages}")


def example_4_geometry():
    """Example 4: Pixel size of a US Letter page"""
    print("\n=== Example 4: Geometry ===")

    for dpi in (72, 150, 300):
        width, height = compute_pixels(612, 792, dpi)
        print(f"{dpi:>4} DPI -> {width}x{height} pixels "
              f"(~{format_file_size(width * height * 3)} uncompressed)")


def main():
    print(f"PDF Rasterizer v{__version__} - API Usage Examples")
    example_1_basic_conversion()
    example_2_jpeg_output()
    example_3_range_parsing()
    example_4_geometry()


if __name__ == "__main__":
    main()
