# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['errgate',
 'errgate.tools',
 'errgate.tools.fastapi',
 'errgate.tools.settings',
 'errgate.tools.starlette']

package_data = \
{'': ['*']}

install_requires = \
['pydantic>=2.0,<3.0',
 'pydantic-settings>=2.0,<3.0']

extras_require = \
{'fastapi': ['fastapi>=0.100.0', 'starlette>=0.27.0'],
 'test': ['pytest>=7.0',
          'pytest-asyncio>=0.21',
          'fastapi>=0.100.0',
          'starlette>=0.27.0',
          'httpx>=0.24',
          'itsdangerous>=2.0']}

setup_kwargs = {
    'name': 'errgate',
    'version': '1.0.0',
    'description': 'Hide error responses and debug pages from anonymous callers',
    'long_description': None,
    'author': 'Mark Vartanyan',
    'author_email': 'kolypto@gmail.com',
    'maintainer': None,
    'maintainer_email': None,
    'url': 'https://github.com/kolypto/py-errgate',
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.9,<4.0',
}


setup(**setup_kwargs)
