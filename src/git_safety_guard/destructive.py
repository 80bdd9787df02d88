"""Commands that destroy history, working-tree state or repository metadata.

Also covers a set of unrelated but equally irreversible system actions (disk
wipes, power state, cloud teardown). Rules are evaluated in order and the first
non-excepted match wins, so more specific rules come before general ones.
"""

from .rules import COMMAND_START, GIT_PREFIX, SAME_COMMAND_ARGS, build_table, rule

G = GIT_PREFIX

# rm flags may be clustered (-rf, -Rfv), split (-r -f) or long (--recursive --force),
# and may come before or after the target.
_RECURSIVE_FLAG = r"(?:-[a-z]*r[a-z]*|--recursive)"
_FORCE_FLAG = r"(?:-[a-z]*f[a-z]*|--force)"


def _rm_with(*flags: str) -> str:
    """Pattern prefix for an rm call carrying every flag in ``flags``, positioned at an argument."""
    lookaheads = "".join(r"(?=(?:[^;&|]*\s)?" + flag + r"(?=$|[\s;&|]))" for flag in flags)
    return r"\brm\s+" + lookaheads + SAME_COMMAND_ARGS


_RM_RF = _rm_with(_RECURSIVE_FLAG, _FORCE_FLAG)

# A target that is the whole argument, optionally followed by "/" or "/*".
_WHOLE = r"(?:/\*?)?(?=$|[\s;&|])"
_SYSTEM_DIRS = r"/(?:etc|var|usr|bin|sbin|lib|boot|root|home)\b"

GIT_HISTORY_RULES = (
    # Working tree and index
    rule("git reset", G + r"reset\b"),
    rule("git restore", G + r"restore\b"),
    rule("git revert", G + r"revert\b"),
    rule("git checkout (user must run manually)", G + r"checkout\b(?!-)"),
    rule("git clean", G + r"clean\b"),
    # Bare stash, optionally chained. "stash list" and "stash show" match none of these.
    rule("git stash (bare command)", G + r"stash\s*(?:$|[;&|])"),
    rule("git stash subcommands", G + r"stash\s+(?:push|drop|clear|pop|apply|save|branch|create|store)\b"),
    rule("git stash with flags", G + r"stash\s+-"),
    # Remote history
    rule("git push --force", G + r"push\b[^;&|]*\s--force"),
    rule("git push -f", G + r"push\b[^;&|]*\s-[a-z]*f[a-z]*\b"),
    rule("git push +refspec (force push)", G + r"push\b[^;&|]*\s\+\S"),
    # -D is force delete, -d is the safe variant
    rule("git branch -D (force delete)", G + r"branch\b.*\s(?-i:-[a-zA-Z]*D[a-zA-Z]*)\b"),
    rule("git rm (use --cached to keep files)", G + r"rm\b", exception=r"--cached\b"),
    # History rewriting
    rule("git rebase", G + r"rebase\b"),
    rule("git commit --amend", G + r"commit\b.*\s--amend\b"),
    rule("git filter-branch", G + r"filter-branch\b"),
    rule("git filter-repo", G + r"filter-repo\b"),
    # Recovery destruction
    rule("git reflog expire/delete", G + r"reflog\s+(?:expire|delete)\b"),
    rule("git gc --prune", G + r"gc\b.*\s--prune\b"),
    rule("git update-ref -d", G + r"update-ref\b.*\s-d\b"),
    rule("git update-ref --delete", G + r"update-ref\b.*\s--delete\b"),
    # Discarding in-progress work
    rule("git switch (user must switch branches manually)", G + r"switch\b"),
    rule("git cherry-pick --abort", G + r"cherry-pick\b.*\s--abort\b"),
    rule("git merge --abort", G + r"merge\b.*\s--abort\b"),
    rule("git worktree remove --force", G + r"worktree\s+remove\b.*\s--force\b"),
    rule("git worktree remove -f", G + r"worktree\s+remove\b.*\s-f\b"),
    rule("git submodule deinit --force", G + r"submodule\s+deinit\b.*\s--force\b"),
    rule("git submodule deinit -f", G + r"submodule\s+deinit\b.*\s-f\b"),
)

# Low-level commands that reach the same end state as the porcelain blocked above.
GIT_PLUMBING_RULES = (
    rule("git read-tree (index manipulation bypass)", G + r"read-tree\b"),
    rule("git update-index (direct index manipulation)", G + r"update-index\b"),
    # Two positional arguments is the write form; "symbolic-ref [--short] HEAD" only reads.
    rule(
        "git symbolic-ref (HEAD manipulation bypass)",
        G + r"symbolic-ref\s+(?:-\S+\s+)*[^-\s;&|]\S*\s+[^-\s;&|]",
    ),
    rule("git checkout-index (working tree overwrite)", G + r"checkout-index\b"),
    # Listing with -l is blocked too: every form can silently rewrite history.
    rule("git replace (object replacement)", G + r"replace\b"),
)

REPOSITORY_FILE_RULES = (
    rule(
        "rm -rf .git",
        _rm_with(_RECURSIVE_FLAG) + r"[\"']?(?:\S*/)?\.git/?[\"']?(?=$|[\s;&|])",
    ),
    rule("rm .git/index.lock (can corrupt staging)", r"\brm\s+.*\.git/index\.lock\b"),
    rule("rm .git/*.lock (can corrupt git operations)", r"\brm\s+.*\.git/\S*\.lock\b"),
    rule("rm .git/index (staging area corruption)", r"\brm\s+.*\.git/index\b"),
    rule("rm .git/ (repository file deletion)", r"\brm\s+.*\.git/"),
)

FILESYSTEM_RULES = (
    rule("rm -rf / (system wipe)", _RM_RF + r"/(?=$|[\s;&|])"),
    rule("rm -rf /* (system wipe)", _RM_RF + r"/\*"),
    rule("rm -rf ~ (home directory wipe)", _RM_RF + r"~" + _WHOLE),
    rule("rm -rf $HOME (home directory wipe)", _RM_RF + r"(?:\$HOME|\$\{HOME\})" + _WHOLE),
    rule("rm -rf .. (parent directory wipe)", _RM_RF + r"\.\." + _WHOLE),
    rule("rm -rf . (current directory wipe)", _RM_RF + r"\." + _WHOLE),
    rule("rm -rf * (current directory wipe)", _RM_RF + r"\*(?=$|[\s;&|])"),
    rule("rm -rf system directory", _RM_RF + _SYSTEM_DIRS),
    rule("rm -rf /Applications (macOS apps)", _RM_RF + r"/Applications\b"),
    rule("rm -rf /System (macOS system)", _RM_RF + r"/System\b"),
    rule("rm -rf /Library (macOS library)", _RM_RF + r"/Library\b"),
)

DISK_RULES = (
    rule(
        "dd to disk device (disk wipe)",
        r"\bdd\b.*\bof\s*=\s*/dev/",
        exception=r"\bof\s*=\s*/dev/(?:null|zero|stdout|stderr)\b",
    ),
    rule("redirect to disk device (disk wipe)", r">\s*/dev/(?:sd|hd|nvme|vd|xvd|disk)"),
    rule("mkfs (filesystem format)", r"\bmkfs\b"),
    rule("mkswap (swap format)", r"\bmkswap\b"),
    rule("fdisk (partition table modification)", r"\bfdisk\b"),
    rule("parted (partition modification)", r"\bparted\b"),
    rule("gdisk (GPT partition modification)", r"\bgdisk\b"),
    rule("diskutil destructive operation", r"\bdiskutil\s+(?:eraseDisk|eraseVolume|partitionDisk|secureErase)"),
)

# Power commands only count in command position: "adb reboot" targets a device.
SYSTEM_RULES = (
    rule("shutdown", COMMAND_START + r"shutdown\b"),
    rule("reboot", COMMAND_START + r"reboot\b"),
    rule("halt", COMMAND_START + r"halt\b"),
    rule("poweroff", COMMAND_START + r"poweroff\b"),
    rule("init runlevel change", COMMAND_START + r"init\s+[0-6]\b"),
    rule("systemctl power command", r"\bsystemctl\s+(?:halt|poweroff|reboot|suspend|hibernate)\b"),
    rule("kill -9 -1 (kill all processes)", r"\bkill\s+.*-9\s+-?1\b"),
    rule("killall -9", r"\bkillall\s+-9\b"),
    rule("pkill -9", r"\bpkill\s+-9\b"),
    rule("fork bomb", r":\(\)\s*\{\s*:\s*\|\s*:\s*&\s*\}\s*;"),
    rule("fork bomb", r"\bforkbomb\b"),
)

PERMISSION_RULES = (
    rule("chmod -R / (system permission change)", r"\bchmod\s+.*-[rR].*\s+/\s*$"),
    rule("chmod -R system directory", r"\bchmod\s+.*-[rR].*\s+" + _SYSTEM_DIRS),
    rule("chmod 000 (remove all permissions)", r"\bchmod\s+.*\b000\s"),
    rule("chmod 777 on system path", r"\bchmod\s+.*\b777\s+/"),
    rule("chown -R / (system ownership change)", r"\bchown\s+.*-[rR].*\s+/\s*$"),
    rule("chown -R system directory", r"\bchown\s+.*-[rR].*\s+" + _SYSTEM_DIRS),
)

DATABASE_RULES = (
    rule("DROP DATABASE/SCHEMA", r"\bDROP\s+(?:DATABASE|SCHEMA)\b"),
    rule("DROP TABLE", r"\bDROP\s+TABLE\b"),
    rule("TRUNCATE TABLE", r"\bTRUNCATE\s+(?:TABLE\s+)?\w"),
    rule("DELETE FROM without WHERE clause", r"\bDELETE\s+FROM\s+\w+\s*(?:;|$)"),
    rule("MongoDB .drop()", r"\.drop\s*\(\s*\)"),
    rule("MongoDB .dropDatabase()", r"\.dropDatabase\s*\(\s*\)"),
    rule("MongoDB .deleteMany({}) (delete all)", r"\.deleteMany\s*\(\s*\{\s*\}\s*\)"),
    rule("Redis FLUSHALL", r"\bFLUSHALL\b"),
    rule("Redis FLUSHDB", r"\bFLUSHDB\b"),
)

CONTAINER_RULES = (
    rule("docker system prune -a (remove all)", r"\bdocker\s+system\s+prune\s+.*-a\b"),
    rule("docker system prune --all", r"\bdocker\s+system\s+prune\s+.*--all\b"),
    rule("docker force remove", r"\bdocker\s+(?:rm|rmi|volume\s+rm|network\s+rm)\s+.*-f\b"),
    rule("docker remove all containers/images", r"\bdocker\s+(?:rm|rmi)\s+.*\$\(docker\s+(?:ps|images)"),
    rule("docker container prune -f", r"\bdocker\s+container\s+prune\s+-f\b"),
    rule("docker image prune -a", r"\bdocker\s+image\s+prune\s+-a\b"),
    rule("docker volume prune -f", r"\bdocker\s+volume\s+prune\s+-f\b"),
    rule("docker-compose down -v (removes volumes)", r"\bdocker-compose\s+down\s+.*-v\b"),
    rule("docker compose down -v (removes volumes)", r"\bdocker\s+compose\s+down\s+.*-v\b"),
    rule("kubectl delete namespace", r"\bkubectl\s+delete\s+(?:namespace|ns)\b"),
    rule("kubectl delete all in all namespaces", r"\bkubectl\s+delete\s+.*--all\s+--all-namespaces\b"),
    rule("kubectl delete all cluster-wide", r"\bkubectl\s+delete\s+.*-A\s+--all\b"),
    rule("kubectl delete all --all", r"\bkubectl\s+delete\s+all\s+--all\b"),
    rule("helm uninstall --no-hooks", r"\bhelm\s+uninstall\s+.*--no-hooks\b"),
)

INFRASTRUCTURE_RULES = (
    rule("terraform destroy", r"\bterraform\s+destroy\b"),
    rule("terraform apply -destroy", r"\bterraform\s+apply\s+.*-destroy\b"),
    rule("tofu destroy", r"\btofu\s+destroy\b"),
    rule("pulumi destroy", r"\bpulumi\s+destroy\b"),
    rule("aws s3 rm --recursive", r"\baws\s+s3\s+rm\s+.*--recursive\b"),
    rule("aws s3 rb --force (bucket deletion)", r"\baws\s+s3\s+rb\s+.*--force\b"),
    rule("aws ec2 terminate-instances", r"\baws\s+ec2\s+terminate-instances\b"),
    rule("aws rds delete-db-instance", r"\baws\s+rds\s+delete-db-instance\b"),
    rule("aws rds delete-db-cluster", r"\baws\s+rds\s+delete-db-cluster\b"),
    rule("aws cloudformation delete-stack", r"\baws\s+cloudformation\s+delete-stack\b"),
    rule("gcloud delete command", r"\bgcloud\s+.*\s+delete\b"),
    rule("gsutil rm -r (recursive delete)", r"\bgsutil\s+rm\s+.*-r\b"),
    rule("az group delete (resource group)", r"\baz\s+group\s+delete\b"),
    rule("az delete command", r"\baz\s+.*\s+delete\b"),
)

REMOTE_CODE_RULES = (
    rule("curl | sh (remote code execution)", r"\bcurl\s+.*\|\s*(?:ba|z)?sh\b"),
    rule("wget | sh (remote code execution)", r"\bwget\s+.*\|\s*(?:ba|z)?sh\b"),
    rule("curl | sudo (remote code as root)", r"\bcurl\s+.*\|\s*sudo\b"),
    rule("wget | sudo (remote code as root)", r"\bwget\s+.*\|\s*sudo\b"),
    rule("eval with command substitution", r"\beval\s+.*\$\("),
    rule("eval with curl", r"\beval\s+.*\bcurl\b"),
    rule("eval with wget", r"\beval\s+.*\bwget\b"),
)

# After the power rules so "sudo reboot" reports "reboot".
PRIVILEGE_RULES = (rule("sudo (requires user approval)", r"\bsudo\b"),)

TOOLING_RULES = (
    rule(
        "convex with --typecheck=disable (unsafe deployment)",
        r"\b(?:npx\s+)?convex\s+(?:dev|deploy)\s+.*--typecheck(?:\s*=\s*|\s+)disable\b",
    ),
)

DESTRUCTIVE_RULES = build_table(
    GIT_HISTORY_RULES
    + GIT_PLUMBING_RULES
    + REPOSITORY_FILE_RULES
    + FILESYSTEM_RULES
    + DISK_RULES
    + SYSTEM_RULES
    + PERMISSION_RULES
    + DATABASE_RULES
    + CONTAINER_RULES
    + INFRASTRUCTURE_RULES
    + REMOTE_CODE_RULES
    + PRIVILEGE_RULES
    + TOOLING_RULES
)
