"""Command-line interface for ddsview"""
import sys
import argparse
import logging
import time
import imageio.v3 as iio
from .dds import DDS
from .enums import ClipMode
from .errors import DDSError, FileReadError, UnsupportedFormatError


def main(argv=None):
    """Command-line interface for ddsview"""
    parser = argparse.ArgumentParser(
        description='Read DDS (DirectDraw Surface) textures and convert DXT5 payloads to images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ddsview texture.dds                           # Display DDS file info
  ddsview texture.dds -o output.png             # Convert to PNG
  ddsview texture.dds -o output.png --flip      # Convert with rows in bottom-up order
  ddsview texture.dds -o output.png --clip legacy
        """
    )

    parser.add_argument('input', help='Input DDS file path')
    parser.add_argument('-o', '--output', help='Output image file path (e.g., output.png)')
    parser.add_argument('--flip', action='store_true',
                        help='Flip the decoded image vertically')
    parser.add_argument('--clip', choices=[mode.value for mode in ClipMode], default=ClipMode.STRICT.value,
                        help='Edge clipping rule for partial blocks (default: strict)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        dds = DDS.from_file(args.input)
        print(dds)

        if args.output:
            print(f"\nConverting to image (flip={args.flip}, clip={args.clip})...")

            # Time decompression
            start_decompress = time.perf_counter()
            image = dds.to_image(flip=args.flip, clip=ClipMode(args.clip))
            decompress_time = time.perf_counter() - start_decompress

            # Time saving
            start_save = time.perf_counter()
            iio.imwrite(args.output, image.to_array())
            save_time = time.perf_counter() - start_save

            print(f"Saved to: {args.output}")
            print(f"Image size: {image.width}x{image.height}")
            if image.depth > 1:
                print(f"Depth: {image.depth} (slice 0 written)")
            print(f"Decompression time: {decompress_time*1000:.2f} ms")
            print(f"Save time: {save_time*1000:.2f} ms")

    except FileReadError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except UnsupportedFormatError as e:
        print(f"Cannot convert to image: {e}")
        sys.exit(1)
    except DDSError as e:
        print(f"Error parsing DDS file: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
