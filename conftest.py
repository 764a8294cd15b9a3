import importlib.util

collect_ignore = ['setup.py']

# The C extension of pyeda is only needed for minimization.
if importlib.util.find_spec('pyeda') is None:
    collect_ignore.append('propnf/espresso.py')
