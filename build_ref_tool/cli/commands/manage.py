"""Build reference management command"""

import sys
from pathlib import Path

import click
from rich.console import Console

from ...api import ReferenceManager
from ...api.exceptions import BuildRefError
from ...constants import ReferenceOperation, DEFAULT_REFERENCE_OPERATION
from ...models.operation import OperationRequest, split_list
from ..utils.output import format_operation_result, format_context, print_error

console = Console()


def _select_operation(operation: ReferenceOperation):
    """Option callback recording the operation an option selects

    Click processes options in command line order, so the last
    operation option given wins.
    """

    def callback(ctx, param, value):
        if value:
            ctx.meta['operation'] = operation
        return value

    return callback


@click.command()
@click.option('-a', '--accept', 'acceptance_tag', metavar='ACCEPTANCE_TAG',
              callback=_select_operation(ReferenceOperation.ACCEPT),
              help='Tag all builds as accepted with ACCEPTANCE_TAG')
@click.option('-c', '--commits', metavar='CODE_COMMIT_LIST',
              help='Commit for each deployment unit ("?" for none)')
@click.option('-f', '--full', is_flag=True,
              callback=_select_operation(ReferenceOperation.LISTFULL),
              help='Detail the builds of every deployment unit in the registry')
@click.option('-g', '--registry-dir', type=click.Path(file_okay=False, path_type=Path),
              help='Registry directory with one subdirectory per deployment unit')
@click.option('-i', '--image-formats', metavar='IMAGE_FORMATS_LIST',
              help='Image formats for each deployment unit')
@click.option('-l', '--list', 'list_builds', is_flag=True,
              callback=_select_operation(ReferenceOperation.LIST),
              help='Detail the builds of the listed deployment units (default)')
@click.option('-p', '--providers', metavar='CODE_PROVIDER_LIST',
              help='Code repo provider for each deployment unit')
@click.option('-r', '--repos', metavar='CODE_REPO_LIST',
              help='Code repo for each deployment unit')
@click.option('-s', '--units', metavar='DEPLOYMENT_UNIT_LIST',
              help='Deployment units to process')
@click.option('-t', '--tags', metavar='CODE_TAG_LIST',
              help='Tag for each deployment unit ("?" for none)')
@click.option('-u', '--update', is_flag=True,
              callback=_select_operation(ReferenceOperation.UPDATE),
              help='Update the build references in the registry')
@click.option('-v', '--verify', 'verification_tag', metavar='VERIFICATION_TAG',
              callback=_select_operation(ReferenceOperation.VERIFY),
              help='Verify the builds, tagging pulled images with VERIFICATION_TAG')
@click.pass_context
def manage(ctx, acceptance_tag, commits, full, registry_dir, image_formats, list_builds,
           providers, repos, units, tags, update, verification_tag):
    """Manage build references for one or more deployment units

    Lists are space separated and may be shorter than the deployment unit
    list; missing entries count as "?". Formats within one entry are
    separated by $IMAGE_FORMAT_SEPARATORS (default ";").

    Examples:
        # Record builds of two units
        build-ref-tool manage -u -g appsettings/seg -s "api web" -c "c1 c2" -t "? v2"

        # Summarise supplied build info
        build-ref-tool manage -l -s "api web" -c "c1 c2" -i "docker lambda"

        # Detail every unit in the registry
        build-ref-tool manage -f -g appsettings/seg

        # Verify builds before a release
        build-ref-tool manage -v rc1 -s "api" -t "v2" -r "api-repo" -p "github"
    """
    request = OperationRequest(
        operation=ctx.meta.get('operation', DEFAULT_REFERENCE_OPERATION),
        units=split_list(units),
        commits=split_list(commits),
        tags=split_list(tags),
        repos=split_list(repos),
        providers=split_list(providers),
        image_formats=split_list(image_formats),
        registry_root=registry_dir,
        acceptance_tag=acceptance_tag,
        verification_tag=verification_tag,
    )

    try:
        manager = ReferenceManager(ctx.obj.config)
        result = manager.run(request)
    except BuildRefError as e:
        print_error(str(e))
        if ctx.obj.debug:
            console.print_exception()
        sys.exit(1)

    if not ctx.obj.quiet:
        format_operation_result(result)
        if ctx.obj.verbose or ctx.obj.debug:
            format_context(result.context)
