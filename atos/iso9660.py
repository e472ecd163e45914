"""Read-only access to ISO 9660 images: volume descriptor, directories, files.

Paths are looked up the way the system's boot tools do it: each component is
upper-cased and any ``;version`` suffix is dropped before comparing with the
names stored on the disc.
"""

import struct
import sys
from dataclasses import dataclass
from pathlib import Path

SECTOR_SIZE = 2048
PVD_SECTOR = 16
MAX_PATH = 256
COPY_BLOCK_SIZE = 512
FLAG_DIRECTORY = 0x02
STANDARD_IDENTIFIER = b"CD001"
OUTPUT_FILE = "out.bin"

# Little-endian halves only; the big-endian copies are skipped.
_RECORD_HEADER = struct.Struct("<BBI4xI4x6BbBBBH2xB")


class InvalidImageError(ValueError):
    """The data is not an ISO 9660 image or is cut short."""


@dataclass(frozen=True)
class DirectoryRecord:
    """One entry of an ISO 9660 directory."""

    length: int
    extended_attribute_length: int
    extent_lba: int
    extent_length: int
    recorded: tuple
    gmt_offset: int
    flags: int
    file_unit_size: int
    interleave_gap_size: int
    volume_sequence_number: int
    name: str

    @property
    def is_directory(self):
        return bool(self.flags & FLAG_DIRECTORY)

    @property
    def normalized_name(self):
        """The identifier upper-cased and without its version suffix."""
        return normalize_path(self.name)


@dataclass(frozen=True)
class PrimaryVolumeDescriptor:
    """The fields of the primary volume descriptor that locate the file tree."""

    type_code: int
    standard_identifier: str
    version: int
    system_identifier: str
    volume_identifier: str
    volume_space_size: int
    volume_set_size: int
    volume_sequence_number: int
    logical_block_size: int
    path_table_size: int
    path_table_location: int
    root: DirectoryRecord
    publisher_identifier: str
    application_identifier: str


def normalize_path(path):
    """Upper-case ASCII letters and cut the path at the first ``;``."""
    upper = "".join(ch.upper() if "a" <= ch <= "z" else ch for ch in path)
    return upper.split(";", 1)[0]


def parse_directory_record(data, offset=0):
    """Decode the directory record starting at ``offset`` in ``data``."""
    end_of_header = offset + _RECORD_HEADER.size
    if end_of_header > len(data):
        raise InvalidImageError("directory record is truncated")
    (
        length,
        ext_len,
        lba,
        extent_length,
        year,
        month,
        day,
        hour,
        minute,
        second,
        gmt_offset,
        flags,
        unit_size,
        gap_size,
        sequence,
        name_length,
    ) = _RECORD_HEADER.unpack_from(data, offset)
    raw_name = bytes(data[end_of_header : end_of_header + name_length])
    if len(raw_name) < name_length:
        raise InvalidImageError("directory record name is truncated")
    name = raw_name.split(b"\0", 1)[0].decode("latin-1")
    return DirectoryRecord(
        length=length,
        extended_attribute_length=ext_len,
        extent_lba=lba,
        extent_length=extent_length,
        recorded=(year, month, day, hour, minute, second),
        gmt_offset=gmt_offset,
        flags=flags,
        file_unit_size=unit_size,
        interleave_gap_size=gap_size,
        volume_sequence_number=sequence,
        name=name,
    )


def _text(data, start, size):
    return bytes(data[start : start + size]).decode("latin-1").rstrip(" \0")


def read_primary_volume_descriptor(image):
    """Read and check the primary volume descriptor of a binary image file."""
    image.seek(PVD_SECTOR * SECTOR_SIZE)
    data = image.read(SECTOR_SIZE)
    if len(data) < SECTOR_SIZE or data[1:6] != STANDARD_IDENTIFIER:
        raise InvalidImageError("Not a valid ISO 9660 image.")
    (space_size,) = struct.unpack_from("<I", data, 80)
    set_size, sequence, block_size = struct.unpack_from("<H2xH2xH", data, 120)
    path_table_size, path_table_location = struct.unpack_from("<I4xI", data, 132)
    return PrimaryVolumeDescriptor(
        type_code=data[0],
        standard_identifier=_text(data, 1, 5),
        version=data[6],
        system_identifier=_text(data, 8, 32),
        volume_identifier=_text(data, 40, 32),
        volume_space_size=space_size,
        volume_set_size=set_size,
        volume_sequence_number=sequence,
        logical_block_size=block_size,
        path_table_size=path_table_size,
        path_table_location=path_table_location,
        root=parse_directory_record(data, 156),
        publisher_identifier=_text(data, 318, 128),
        application_identifier=_text(data, 574, 128),
    )


def iter_directory(image, lba, size):
    """Yield the records of the directory of ``size`` bytes at sector ``lba``.

    Iteration stops at the first record whose length is zero.
    """
    image.seek(lba * SECTOR_SIZE)
    data = image.read(size)
    offset = 0
    while offset < len(data):
        if data[offset] == 0:
            return
        record = parse_directory_record(data, offset)
        yield record
        offset += record.length


def find_record(image, path):
    """Find the record of the file at ``path``; FileNotFoundError if absent.

    A path that ends at a directory is reported as not found.
    """
    pvd = read_primary_volume_descriptor(image)
    components = normalize_path(path[:MAX_PATH]).split("/")
    lba, size = pvd.root.extent_lba, pvd.root.extent_length
    for depth, component in enumerate(components):
        is_last = depth == len(components) - 1
        for record in iter_directory(image, lba, size):
            if record.normalized_name != component:
                continue
            if not record.is_directory:
                return record
            if is_last:
                raise FileNotFoundError(path)
            lba, size = record.extent_lba, record.extent_length
            break
        else:
            raise FileNotFoundError(path)
    raise FileNotFoundError(path)


def _read_extent(image, record):
    blocks = (record.extent_length + COPY_BLOCK_SIZE - 1) // COPY_BLOCK_SIZE
    image.seek(record.extent_lba * SECTOR_SIZE)
    return image.read(blocks * COPY_BLOCK_SIZE)


def extract_file(image, path):
    """Return the contents of the file at ``path`` in whole 512-byte blocks."""
    return _read_extent(image, find_record(image, path))


def main(argv=None):
    """Show the image's volume size, or copy one file from it to out.bin."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: iso9660 <iso_image> [<file_name>]")
        return 1
    image_path = args[0]
    try:
        image = open(image_path, "rb")
    except OSError:
        print(f"Failed to open ISO file: {image_path}", file=sys.stderr)
        return 1
    with image:
        print(f"Reading ISO 9660 image: {image_path}")
        try:
            pvd = read_primary_volume_descriptor(image)
        except InvalidImageError as exc:
            print(exc)
            return 1
        print(f"Volume: {pvd.volume_identifier}, {pvd.volume_space_size} blocks")
        if len(args) < 2:
            print("No file name specified, exiting...")
            return 0
        print(f"extent: {pvd.root.extent_length}")
        try:
            record = find_record(image, args[1])
        except (FileNotFoundError, InvalidImageError):
            print("File not found")
            return 1
        blocks = (record.extent_length + COPY_BLOCK_SIZE - 1) // COPY_BLOCK_SIZE
        print(f"File found: {record.normalized_name}")
        print(f"ExtentLengthLE: {blocks}. ExtentLocationLE: {record.extent_lba}")
        data = _read_extent(image, record)
    try:
        Path(OUTPUT_FILE).write_bytes(data)
    except OSError as exc:
        print(f"Failed to open output file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())