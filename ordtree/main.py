import getopt
import math
import sys
import os

from . import log
from .exception import OrdTreeError, FileParseError, InvalidTypeError
from .order import natural_order, key_order, reverse_order
from .tree.bstree import BSTree
from .valuefile import open_value_file

import ordtree

def _parse_float(s):
    # NaN compares equal to everything under natural_order
    f = float(s)
    if math.isnan(f):
        raise ValueError("NaN cannot be ordered")
    return f

_value_parsers = {
        'int': int,
        'float': _parse_float,
        'str': str,
    }

def value_parser(typename):
    try:
        return _value_parsers[typename]
    except KeyError:
        raise InvalidTypeError(typename)

def make_comparator(options):
    if options['ignore_case']:
        if options['type'] != 'str':
            raise InvalidTypeError(options['type'],
                    " (--ignore-case only applies to str)")
        cmp = key_order(str.casefold)
    else:
        cmp = natural_order
    if options['reverse']:
        cmp = reverse_order(cmp)
    return cmp

def build_tree(filename, parse, cmp):
    tree = BSTree(cmp)
    with open_value_file(filename) as vf:
        for value in vf.reader(parse):
            tree.add(value)
    log.info("loaded {0:d} distinct values from {1:s}".format(len(tree),
        filename))
    return tree

def parse_queries(queries, parse):
    values = []
    for q in queries:
        try:
            values.append(parse(q))
        except ValueError:
            log.fatal_exit(2, "invalid query value `", q, "'")
    return values


def ordtree_main(argv):
    log.logger = log.Logger()
    (options, filename, queries) = parse_arguments(argv)

    try:
        parse = value_parser(options['type'])
        cmp = make_comparator(options)
        values = parse_queries(queries, parse)
        tree = build_tree(filename, parse, cmp)
    except FileParseError as e:
        log.fatal_exit(2, "unable to parse input file: \n", str(e))
    except OrdTreeError as e:
        log.fatal_exit(2, e)
    except IOError as e:
        log.fatal_exit(2, "unable to read input file: \n", str(e))

    missing = 0
    for q, v in zip(queries, values):
        if tree.contains(v):
            sys.stdout.write(q + ": found\n")
        else:
            log.debug1("no value equal to ", repr(v))
            sys.stdout.write(q + ": not found\n")
            missing += 1

    if options['stats']:
        sys.stdout.write("; size = " + str(tree.size()) + "\n")
        sys.stdout.write("; height = " + str(tree.height()) + "\n")

    return 1 if missing > 0 else 0

def default_options():
    opts = {
            'type' : 'str',
            'reverse' : False,
            'ignore_case' : False,
            'stats' : False,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def parse_arguments(argv):
    long_opts = [
            'help',
            'ignore-case',
            'reverse',
            'stats',
            'type=',
            'verbose',
            'color=',
            'version'
    ]
    options = default_options()
    opts = 'hirst:v'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-t', '--type'):
            try:
                value_parser(arg)
            except InvalidTypeError:
                invalid_argument(opt, arg)
            options['type'] = arg

        elif opt in ('-r', '--reverse'):
            options['reverse'] = True

        elif opt in ('-i', '--ignore-case'):
            options['ignore_case'] = True

        elif opt in ('-s', '--stats'):
            options['stats'] = True

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    if len(args) < 2:
        log.fatal_exit(2, 'missing arguments', "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    return (options, args[0], args[1:])

def version():
    sys.stdout.write("ordtree " + ordtree.__version__ + "\n")


def usage(program_name):
    def_opts = default_options()
    sys.stdout.write(
            'Usage: {0:s} [option]... FILE VALUE...'.format(program_name))
    sys.stdout.write(
'''
Load the values listed in FILE (one per line, '-' for stdin) into a binary
search tree and report whether each VALUE is contained in it

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Ordering:
  -t, --type=TYPE            parse values as TYPE; TYPE can be 'int', 'float'
                               or 'str' (default {type:s})
  -r, --reverse              reverse the ordering
  -i, --ignore-case          compare strings case-insensitively

Output:
  -s, --stats                print the size and height of the tree

Exit status is 0 if every VALUE was found, 1 if any was not found and 2 on
errors.
'''.format(type=def_opts['type'])
    )

def main():
    try:
        sys.exit(ordtree_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
