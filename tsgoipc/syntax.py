"""Syntax kinds of the TypeScript abstract syntax tree."""

from __future__ import annotations

from enum import IntEnum, auto


class SyntaxKind(IntEnum):
    """Node kinds, numbered as the server numbers them."""

    Unknown = 0
    EndOfFile = auto()
    SingleLineCommentTrivia = auto()
    MultiLineCommentTrivia = auto()
    NewLineTrivia = auto()
    WhitespaceTrivia = auto()
    ConflictMarkerTrivia = auto()
    NonTextFileMarkerTrivia = auto()
    NumericLiteral = auto()
    BigIntLiteral = auto()
    StringLiteral = auto()
    JsxText = auto()
    JsxTextAllWhiteSpaces = auto()
    RegularExpressionLiteral = auto()
    NoSubstitutionTemplateLiteral = auto()
    TemplateHead = auto()
    TemplateMiddle = auto()
    TemplateTail = auto()
    OpenBraceToken = auto()
    CloseBraceToken = auto()
    OpenParenToken = auto()
    CloseParenToken = auto()
    OpenBracketToken = auto()
    CloseBracketToken = auto()
    DotToken = auto()
    DotDotDotToken = auto()
    SemicolonToken = auto()
    CommaToken = auto()
    QuestionDotToken = auto()
    LessThanToken = auto()
    LessThanSlashToken = auto()
    GreaterThanToken = auto()
    LessThanEqualsToken = auto()
    GreaterThanEqualsToken = auto()
    EqualsEqualsToken = auto()
    ExclamationEqualsToken = auto()
    EqualsEqualsEqualsToken = auto()
    ExclamationEqualsEqualsToken = auto()
    EqualsGreaterThanToken = auto()
    PlusToken = auto()
    MinusToken = auto()
    AsteriskToken = auto()
    AsteriskAsteriskToken = auto()
    SlashToken = auto()
    PercentToken = auto()
    PlusPlusToken = auto()
    MinusMinusToken = auto()
    LessThanLessThanToken = auto()
    GreaterThanGreaterThanToken = auto()
    GreaterThanGreaterThanGreaterThanToken = auto()
    AmpersandToken = auto()
    BarToken = auto()
    CaretToken = auto()
    ExclamationToken = auto()
    TildeToken = auto()
    AmpersandAmpersandToken = auto()
    BarBarToken = auto()
    QuestionToken = auto()
    ColonToken = auto()
    AtToken = auto()
    QuestionQuestionToken = auto()
    BacktickToken = auto()
    HashToken = auto()
    EqualsToken = auto()
    PlusEqualsToken = auto()
    MinusEqualsToken = auto()
    AsteriskEqualsToken = auto()
    AsteriskAsteriskEqualsToken = auto()
    SlashEqualsToken = auto()
    PercentEqualsToken = auto()
    LessThanLessThanEqualsToken = auto()
    GreaterThanGreaterThanEqualsToken = auto()
    GreaterThanGreaterThanGreaterThanEqualsToken = auto()
    AmpersandEqualsToken = auto()
    BarEqualsToken = auto()
    BarBarEqualsToken = auto()
    AmpersandAmpersandEqualsToken = auto()
    QuestionQuestionEqualsToken = auto()
    CaretEqualsToken = auto()
    Identifier = auto()
    PrivateIdentifier = auto()
    JSDocCommentTextToken = auto()
    BreakKeyword = auto()
    CaseKeyword = auto()
    CatchKeyword = auto()
    ClassKeyword = auto()
    ConstKeyword = auto()
    ContinueKeyword = auto()
    DebuggerKeyword = auto()
    DefaultKeyword = auto()
    DeleteKeyword = auto()
    DoKeyword = auto()
    ElseKeyword = auto()
    EnumKeyword = auto()
    ExportKeyword = auto()
    ExtendsKeyword = auto()
    FalseKeyword = auto()
    FinallyKeyword = auto()
    ForKeyword = auto()
    FunctionKeyword = auto()
    IfKeyword = auto()
    ImportKeyword = auto()
    InKeyword = auto()
    InstanceOfKeyword = auto()
    NewKeyword = auto()
    NullKeyword = auto()
    ReturnKeyword = auto()
    SuperKeyword = auto()
    SwitchKeyword = auto()
    ThisKeyword = auto()
    ThrowKeyword = auto()
    TrueKeyword = auto()
    TryKeyword = auto()
    TypeOfKeyword = auto()
    VarKeyword = auto()
    VoidKeyword = auto()
    WhileKeyword = auto()
    WithKeyword = auto()
    ImplementsKeyword = auto()
    InterfaceKeyword = auto()
    LetKeyword = auto()
    PackageKeyword = auto()
    PrivateKeyword = auto()
    ProtectedKeyword = auto()
    PublicKeyword = auto()
    StaticKeyword = auto()
    YieldKeyword = auto()
    AbstractKeyword = auto()
    AccessorKeyword = auto()
    AsKeyword = auto()
    AssertsKeyword = auto()
    AssertKeyword = auto()
    AnyKeyword = auto()
    AsyncKeyword = auto()
    AwaitKeyword = auto()
    BooleanKeyword = auto()
    ConstructorKeyword = auto()
    DeclareKeyword = auto()
    GetKeyword = auto()
    ImmediateKeyword = auto()
    InferKeyword = auto()
    IntrinsicKeyword = auto()
    IsKeyword = auto()
    KeyOfKeyword = auto()
    ModuleKeyword = auto()
    NamespaceKeyword = auto()
    NeverKeyword = auto()
    OutKeyword = auto()
    ReadonlyKeyword = auto()
    RequireKeyword = auto()
    NumberKeyword = auto()
    ObjectKeyword = auto()
    SatisfiesKeyword = auto()
    SetKeyword = auto()
    StringKeyword = auto()
    SymbolKeyword = auto()
    TypeKeyword = auto()
    UndefinedKeyword = auto()
    UniqueKeyword = auto()
    UnknownKeyword = auto()
    UsingKeyword = auto()
    FromKeyword = auto()
    GlobalKeyword = auto()
    BigIntKeyword = auto()
    OverrideKeyword = auto()
    OfKeyword = auto()
    QualifiedName = auto()
    ComputedPropertyName = auto()
    TypeParameter = auto()
    Parameter = auto()
    Decorator = auto()
    PropertySignature = auto()
    PropertyDeclaration = auto()
    MethodSignature = auto()
    MethodDeclaration = auto()
    ClassStaticBlockDeclaration = auto()
    Constructor = auto()
    GetAccessor = auto()
    SetAccessor = auto()
    CallSignature = auto()
    ConstructSignature = auto()
    IndexSignature = auto()
    TypePredicate = auto()
    TypeReference = auto()
    FunctionType = auto()
    ConstructorType = auto()
    TypeQuery = auto()
    TypeLiteral = auto()
    ArrayType = auto()
    TupleType = auto()
    OptionalType = auto()
    RestType = auto()
    UnionType = auto()
    IntersectionType = auto()
    ConditionalType = auto()
    InferType = auto()
    ParenthesizedType = auto()
    ThisType = auto()
    TypeOperator = auto()
    IndexedAccessType = auto()
    MappedType = auto()
    LiteralType = auto()
    NamedTupleMember = auto()
    TemplateLiteralType = auto()
    TemplateLiteralTypeSpan = auto()
    ImportType = auto()
    ObjectBindingPattern = auto()
    ArrayBindingPattern = auto()
    BindingElement = auto()
    ArrayLiteralExpression = auto()
    ObjectLiteralExpression = auto()
    PropertyAccessExpression = auto()
    ElementAccessExpression = auto()
    CallExpression = auto()
    NewExpression = auto()
    TaggedTemplateExpression = auto()
    TypeAssertionExpression = auto()
    ParenthesizedExpression = auto()
    FunctionExpression = auto()
    ArrowFunction = auto()
    DeleteExpression = auto()
    TypeOfExpression = auto()
    VoidExpression = auto()
    AwaitExpression = auto()
    PrefixUnaryExpression = auto()
    PostfixUnaryExpression = auto()
    BinaryExpression = auto()
    ConditionalExpression = auto()
    TemplateExpression = auto()
    YieldExpression = auto()
    SpreadElement = auto()
    ClassExpression = auto()
    OmittedExpression = auto()
    ExpressionWithTypeArguments = auto()
    AsExpression = auto()
    NonNullExpression = auto()
    MetaProperty = auto()
    SyntheticExpression = auto()
    SatisfiesExpression = auto()
    TemplateSpan = auto()
    SemicolonClassElement = auto()
    Block = auto()
    EmptyStatement = auto()
    VariableStatement = auto()
    ExpressionStatement = auto()
    IfStatement = auto()
    DoStatement = auto()
    WhileStatement = auto()
    ForStatement = auto()
    ForInStatement = auto()
    ForOfStatement = auto()
    ContinueStatement = auto()
    BreakStatement = auto()
    ReturnStatement = auto()
    WithStatement = auto()
    SwitchStatement = auto()
    LabeledStatement = auto()
    ThrowStatement = auto()
    TryStatement = auto()
    DebuggerStatement = auto()
    VariableDeclaration = auto()
    VariableDeclarationList = auto()
    FunctionDeclaration = auto()
    ClassDeclaration = auto()
    InterfaceDeclaration = auto()
    TypeAliasDeclaration = auto()
    EnumDeclaration = auto()
    ModuleDeclaration = auto()
    ModuleBlock = auto()
    CaseBlock = auto()
    NamespaceExportDeclaration = auto()
    ImportEqualsDeclaration = auto()
    ImportDeclaration = auto()
    ImportClause = auto()
    NamespaceImport = auto()
    NamedImports = auto()
    ImportSpecifier = auto()
    ExportAssignment = auto()
    ExportDeclaration = auto()
    NamedExports = auto()
    NamespaceExport = auto()
    ExportSpecifier = auto()
    MissingDeclaration = auto()
    ExternalModuleReference = auto()
    JsxElement = auto()
    JsxSelfClosingElement = auto()
    JsxOpeningElement = auto()
    JsxClosingElement = auto()
    JsxFragment = auto()
    JsxOpeningFragment = auto()
    JsxClosingFragment = auto()
    JsxAttribute = auto()
    JsxAttributes = auto()
    JsxSpreadAttribute = auto()
    JsxExpression = auto()
    JsxNamespacedName = auto()
    CaseClause = auto()
    DefaultClause = auto()
    HeritageClause = auto()
    CatchClause = auto()
    ImportAttributes = auto()
    ImportAttribute = auto()
    PropertyAssignment = auto()
    ShorthandPropertyAssignment = auto()
    SpreadAssignment = auto()
    EnumMember = auto()
    SourceFile = auto()
    Bundle = auto()
    JSDocTypeExpression = auto()
    JSDocNameReference = auto()
    JSDocMemberName = auto()
    JSDocAllType = auto()
    JSDocNullableType = auto()
    JSDocNonNullableType = auto()
    JSDocOptionalType = auto()
    JSDocVariadicType = auto()
    JSDoc = auto()
    JSDocText = auto()
    JSDocTypeLiteral = auto()
    JSDocSignature = auto()
    JSDocLink = auto()
    JSDocLinkCode = auto()
    JSDocLinkPlain = auto()
    JSDocTag = auto()
    JSDocAugmentsTag = auto()
    JSDocImplementsTag = auto()
    JSDocDeprecatedTag = auto()
    JSDocPublicTag = auto()
    JSDocPrivateTag = auto()
    JSDocProtectedTag = auto()
    JSDocReadonlyTag = auto()
    JSDocOverrideTag = auto()
    JSDocCallbackTag = auto()
    JSDocOverloadTag = auto()
    JSDocParameterTag = auto()
    JSDocReturnTag = auto()
    JSDocThisTag = auto()
    JSDocTypeTag = auto()
    JSDocTemplateTag = auto()
    JSDocTypedefTag = auto()
    JSDocSeeTag = auto()
    JSDocPropertyTag = auto()
    JSDocSatisfiesTag = auto()
    JSDocImportTag = auto()
    SyntaxList = auto()
    JSTypeAliasDeclaration = auto()
    JSExportAssignment = auto()
    CommonJSExport = auto()
    JSImportDeclaration = auto()
    NotEmittedStatement = auto()
    PartiallyEmittedExpression = auto()
    CommaListExpression = auto()
    SyntheticReferenceExpression = auto()
    Count = auto()
    NodeList = 0xFFFF_FFFF

    def __str__(self) -> str:
        return self.name