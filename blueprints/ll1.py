"""
LL1 analysis API blueprint.
Grammar analysis (FIRST/FOLLOW, LL(1) check, parsing table) and input string parsing.
"""
from flask import Blueprint, current_app, request, jsonify

from ll1.analysis import LL1
from ll1.errors import GrammarError
from ll1.render import (
    conflicts_to_list,
    sets_to_dict,
    table_to_dict,
    tree_to_dict,
    tree_to_dot,
)

ll1_bp = Blueprint('ll1', __name__, url_prefix='/api')


def _read_productions(data):
    text_list = data.get('inpProductions')
    if isinstance(text_list, str):
        text_list = text_list.splitlines()
    if not isinstance(text_list, list) or not all(isinstance(t, str) for t in text_list):
        raise GrammarError("'inpProductions' must be a list of production strings")
    limit = current_app.config['MAX_PRODUCTIONS']
    if len(text_list) > limit:
        raise GrammarError(f"at most {limit} productions are accepted")
    return text_list


@ll1_bp.route('/test', methods=['GET'])
def test():
    return jsonify({
        "code": 0,
        "msg": "test success!"
    }), 200


@ll1_bp.route('/LL1Analyse', methods=['POST'])
def LL1Analyse():
    """LL1 grammar analysis"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    ll1 = LL1(_read_productions(data)).init()

    data = {
        "S": ll1.S,
        "Vn": ll1.Vn,
        "Vt": ll1.Vt,
        "formulas_dict": ll1.formulas_dict,
        "first": sets_to_dict(ll1.first),
        "follow": sets_to_dict(ll1.follow),
        "table": table_to_dict(ll1.table),
        "isLL1": ll1.isLL1,
        "conflicts": conflicts_to_list(ll1.conflicts),
    }
    return jsonify({
        "code": 0,
        "data": data
    }), 200


@ll1_bp.route('/LL1AnalyseInp', methods=['POST'])
def LL1AnalyseInp():
    """LL1 input string analysis"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    text_list = _read_productions(data)
    inp_str = data.get('inpStr')
    if not isinstance(inp_str, str):
        return jsonify({
            "code": 1,
            "msg": "'inpStr' must be a string"
        }), 400
    if len(inp_str) > current_app.config['MAX_INPUT_LENGTH']:
        return jsonify({
            "code": 1,
            "msg": "input string is too long"
        }), 400

    ll1 = LL1(text_list).init()
    info = dict(ll1.solve(inp_str))
    result = ll1.result
    tree = result.tree if result is not None else None
    info.update({
        "accepted": result.accepted if result is not None else False,
        "reason": result.reason if result is not None else None,
        "position": result.position if result is not None else None,
        "tree": tree_to_dict(tree),
        "tree_dot_str": tree_to_dot(tree) if tree is not None else "",
    })
    return jsonify({
        "code": 0,
        "data": info
    }), 200
