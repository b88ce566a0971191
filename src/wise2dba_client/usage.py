"""Help, version and license text."""

TOOL_USAGE = """Wise2DBA
========

The Wise2 DNA Block Aligner (DBA) aligns two DNA sequences using the
assumption that the sequences share a number of colinear blocks of
conservation separated by potentially large and varied lengths of DNA in the
two sequences.

[Required]

      --asequence    : file : first DNA sequence to align
      --bsequence    : file : second DNA sequence to align

[Optional]

      --para         :      : Enable display of parameters in output.
      --nopara       :      : Disable display of parameters in output.
      --pretty       :      : Enable pretty ASCII alignment.
      --nopretty     :      : Disable pretty ASCII alignment.
"""

GENERIC_USAGE = """[General]

  -h, --help           :      : prints this help text
      --async          :      : forces to make an asynchronous query
      --email          : str  : e-mail address
      --title          : str  : title for job
      --status         :      : get job status
      --resultTypes    :      : get available result types for job
      --polljob        :      : poll for the status of a job
      --jobid          : str  : jobid that was returned when an asynchronous
                                job was submitted.
      --outfile        : str  : file name for results (default is jobid;
                                "-" for STDOUT)
      --outformat      : str  : result format to retrieve
      --params         :      : list input parameters
      --paramDetail    : str  : display details for input parameter
      --quiet          :      : decrease output
      --verbose        :      : increase output
      --version        :      : prints out the version of the program
      --debugLevel     : int  : debug output level
      --endpoint       : str  : service endpoint URL

Every option may also be given as /option, e.g. /email.

Synchronous job:

  The results/errors are returned as soon as the job is finished.
  Usage: wise2dba --email <your@email> [options...] --asequence seqA --bsequence seqB
  Returns: results as an attachment

Asynchronous job:

  Use this if you want to retrieve the results at a later time. The results
  are stored for up to 24 hours.
  Usage: wise2dba --async --email <your@email> [options...] --asequence seqA --bsequence seqB
  Returns: jobid

  Use the jobid to query for the status of the job. If the job is finished,
  it also returns the results/errors.
  Usage: wise2dba --polljob --jobid <jobId> [--outfile string]
  Returns: string indicating the status of the job and if applicable, results
  as an attachment.
"""

CLIENT_LICENSE = """Copyright 2012-2018 EMBL - European Bioinformatics Institute

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""


def usage_text() -> str:
    return f"{TOOL_USAGE}\n{GENERIC_USAGE}"
