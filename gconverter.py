import os

from typing import Union

from graph import read_graph, write_graph

PathType = Union[str, os.PathLike]


def text_to_bin(infile_name: PathType, outfile_name: PathType) -> None:
    write_graph(read_graph(infile_name), outfile_name, binary=True)


def bin_to_text(infile_name: PathType, outfile_name: PathType) -> None:
    write_graph(read_graph(infile_name, binary=True), outfile_name)


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('--to-text', action='store_true',
                        help='convert a binary graph back to text')

    args = parser.parse_args()

    if args.to_text:
        bin_to_text(args.infile, args.outfile)
    else:
        text_to_bin(args.infile, args.outfile)
